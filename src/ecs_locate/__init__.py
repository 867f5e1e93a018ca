import argparse
import sys
from importlib.metadata import PackageNotFoundError, version
from typing import TYPE_CHECKING

import boto3
from botocore.config import Config

if TYPE_CHECKING:
    from mypy_boto3_ecs import ECSClient

from .aws_service import ECSService
from .core.utils import print_error, show_spinner
from .ui import print_placements

try:
    __version__ = version("ecs-locate")
except PackageNotFoundError:
    __version__ = "dev"


def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Find the tasks and EC2 hosts of every ECS service whose ARN contains a query"
    )
    parser.add_argument("--version", action="version", version=f"ecs-locate {__version__}")
    parser.add_argument("-q", "--query", help="Query used to filter services", type=str, default="")
    parser.add_argument("--profile", help="AWS profile to use for authentication", type=str, default=None)
    parser.add_argument("--region", help="AWS region to search", type=str, default=None)
    parser.add_argument(
        "--batch-size",
        help="Maximum identifiers per describe call (default: all of a cluster's identifiers in one call)",
        type=_positive_int,
        default=None,
    )
    parser.add_argument("-v", "--verbose", help="Report progress of each lookup stage on stderr", action="store_true")
    return parser


def main() -> None:
    """Locate the hosts running the tasks of matching ECS services."""
    parser = _build_parser()
    args = parser.parse_args()

    if not args.query:
        parser.error("You must specify a query in order to filter services")

    try:
        ecs_client = _create_aws_client(args.profile, args.region)
        ecs_service = ECSService(ecs_client, batch_size=args.batch_size, verbose=args.verbose)

        with show_spinner():
            placements = ecs_service.find_service_instances(args.query)

    except Exception as e:
        print_error(f"Error: {e}")
        sys.exit(1)

    print_placements(placements)


def _create_aws_client(profile_name: str | None, region_name: str | None = None) -> "ECSClient":
    """Create optimized AWS ECS client with connection pooling."""
    config = Config(
        max_pool_connections=5,
        retries={"max_attempts": 2, "mode": "adaptive"},
    )

    if profile_name or region_name:
        session = boto3.Session(profile_name=profile_name, region_name=region_name)
        return session.client("ecs", config=config)
    return boto3.client("ecs", config=config)


if __name__ == "__main__":
    main()
