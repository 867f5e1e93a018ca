"""Task operations for ECS."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ...core.base import BaseAWSService
from ...core.types import ServiceMatch, TaskPlacement
from ...core.utils import describe_by_cluster, paginate_aws_list

if TYPE_CHECKING:
    from mypy_boto3_ecs.type_defs import TaskTypeDef


class TaskService(BaseAWSService):
    """Service for ECS task operations."""

    def get_task_arns(self, cluster_arn: str, service_arn: str) -> list[str]:
        return paginate_aws_list(
            self.ecs_client, "list_tasks", "taskArns", cluster=cluster_arn, serviceName=service_arn
        )

    def list_service_tasks(self, services: Iterable[ServiceMatch]) -> list[TaskPlacement]:
        """List the tasks of every service, keeping each task tied to its service."""
        return [
            TaskPlacement(service=service, task_arn=task_arn)
            for service in services
            for task_arn in self.get_task_arns(service.cluster_arn, service.service_arn)
        ]

    def describe_tasks(self, cluster_arn: str, task_arns: list[str]) -> list[TaskTypeDef]:
        response = self.ecs_client.describe_tasks(cluster=cluster_arn, tasks=task_arns)
        return response.get("tasks", [])

    def resolve_tasks(self, services: Iterable[ServiceMatch]) -> list[TaskPlacement]:
        """List tasks for the matched services and bind each to its container instance.

        Tasks the describe call does not return (stopped in the meantime, reported under
        ``failures``) are dropped.
        """
        tasks = self.list_service_tasks(services)
        if not tasks:
            return []

        described = describe_by_cluster(
            tasks,
            lambda task: task.task_arn,
            self.describe_tasks,
            "taskArn",
            self.batch_size,
        )
        return [
            task.bind(described[task.task_arn].get("containerInstanceArn"))
            for task in tasks
            if task.task_arn in described
        ]
