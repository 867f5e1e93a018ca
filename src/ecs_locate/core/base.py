"""Base classes for AWS services."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient


class BaseAWSService:
    """Base class for AWS service interactions with common patterns."""

    def __init__(self, ecs_client: ECSClient, batch_size: int | None = None) -> None:
        self.ecs_client = ecs_client
        self.batch_size = batch_size
