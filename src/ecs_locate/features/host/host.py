"""Container instance operations for ECS."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from ...core.base import BaseAWSService
from ...core.types import HostPlacement, TaskPlacement
from ...core.utils import describe_by_cluster, extract_name_from_arn, print_warning

if TYPE_CHECKING:
    from mypy_boto3_ecs.type_defs import ContainerInstanceTypeDef


class HostService(BaseAWSService):
    """Service for resolving tasks to the EC2 instances that run them."""

    def describe_container_instances(
        self, cluster_arn: str, container_instance_arns: list[str]
    ) -> list[ContainerInstanceTypeDef]:
        response = self.ecs_client.describe_container_instances(
            cluster=cluster_arn, containerInstances=container_instance_arns
        )
        return response.get("containerInstances", [])

    def resolve_hosts(self, tasks: Iterable[TaskPlacement]) -> list[HostPlacement]:
        """Resolve every bound task to its host, one record per task."""
        bound: list[TaskPlacement] = []
        for task in tasks:
            if task.container_instance_arn:
                bound.append(task)
            else:
                print_warning(f"Task {extract_name_from_arn(task.task_arn)} has no container instance, skipping")
        if not bound:
            return []

        described = describe_by_cluster(
            bound,
            lambda task: task.container_instance_arn or "",
            self.describe_container_instances,
            "containerInstanceArn",
            self.batch_size,
        )
        hosts: list[HostPlacement] = []
        for task in bound:
            container_instance = described.get(task.container_instance_arn or "")
            if not container_instance:
                continue
            ec2_instance_id = container_instance.get("ec2InstanceId")
            if not ec2_instance_id:
                instance_name = extract_name_from_arn(task.container_instance_arn or "")
                print_warning(f"Container instance {instance_name} has no EC2 instance id, skipping")
                continue
            hosts.append(HostPlacement(task=task, ec2_instance_id=ec2_instance_id))
        return hosts
