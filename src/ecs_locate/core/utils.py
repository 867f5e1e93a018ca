"""Utility functions for ecs-locate."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence
from contextlib import contextmanager
from typing import TYPE_CHECKING, Any, Literal, Protocol, TypeVar

from rich.console import Console

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient

# stdout carries result blocks only
console = Console(stderr=True)


class _ClusterScoped(Protocol):
    @property
    def cluster_arn(self) -> str: ...


T = TypeVar("T")
R = TypeVar("R", bound=_ClusterScoped)


def extract_name_from_arn(arn: str) -> str:
    """Extract resource name from AWS ARN."""
    return arn.split("/")[-1]


def print_error(message: str) -> None:
    console.print(f"❌ {message}", style="red", markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_warning(message: str) -> None:
    console.print(f"⚠️ {message}", style="yellow", markup=False, highlight=False, emoji=False, soft_wrap=True)


def print_info(message: str) -> None:
    console.print(message, style="blue", markup=False, highlight=False, emoji=False, soft_wrap=True)


@contextmanager
def show_spinner(message: str = "Searching ECS inventory...") -> Iterator[None]:
    """Context manager that shows a spinner while running operations."""
    with console.status(message, spinner="dots", spinner_style="cyan"):
        yield


def paginate_aws_list(
    client: ECSClient,
    operation_name: Literal[
        "list_clusters",
        "list_container_instances",
        "list_services",
        "list_tasks",
    ],
    result_key: str,
    **kwargs: str,
) -> list[str]:
    paginator = client.get_paginator(operation_name)  # type: ignore[no-matching-overload]
    page_iterator = paginator.paginate(**kwargs)

    results: list[str] = []
    for page in page_iterator:
        results.extend(page.get(result_key, []))

    return results


def batch_items(items: Sequence[T], size: int | None) -> Iterator[list[T]]:
    """Yield consecutive batches of items. A size of None yields everything in one batch."""
    if not items:
        return
    if size is None:
        yield list(items)
        return
    if size < 1:
        raise ValueError(f"batch size must be positive, got {size}")
    for start in range(0, len(items), size):
        yield list(items[start : start + size])


def group_by_cluster(records: Iterable[R]) -> dict[str, list[R]]:
    """Group records by cluster ARN, keeping first-seen cluster order."""
    grouped: dict[str, list[R]] = {}
    for record in records:
        grouped.setdefault(record.cluster_arn, []).append(record)
    return grouped


def describe_by_cluster(
    records: Iterable[R],
    identifier: Callable[[R], str],
    describe: Callable[[str, list[str]], list[Any]],
    result_key: str,
    batch_size: int | None = None,
) -> dict[str, Any]:
    """Batch-describe the distinct identifiers of each cluster and index the results.

    ECS describe calls are cluster-scoped, so records are grouped by cluster first.
    ``describe`` receives the cluster ARN and one batch of identifiers and returns the
    descriptions found. Identifiers the API could not describe are simply absent from
    the returned mapping.
    """
    described: dict[str, Any] = {}
    for cluster_arn, cluster_records in group_by_cluster(records).items():
        identifiers = list(dict.fromkeys(identifier(record) for record in cluster_records))
        for batch in batch_items(identifiers, batch_size):
            for description in describe(cluster_arn, batch):
                described[description[result_key]] = description
    return described
