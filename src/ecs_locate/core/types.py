"""Records passed between the lookup stages."""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class ServiceMatch:
    """A service whose ARN matched the query."""

    cluster_arn: str
    service_arn: str

    def __post_init__(self) -> None:
        if not self.cluster_arn or not self.service_arn:
            raise ValueError("cluster_arn and service_arn must both be non-empty")


@dataclass(frozen=True)
class TaskPlacement:
    """A running task of a matched service, optionally bound to its container instance."""

    service: ServiceMatch
    task_arn: str
    container_instance_arn: str | None = None

    @property
    def cluster_arn(self) -> str:
        return self.service.cluster_arn

    @property
    def service_arn(self) -> str:
        return self.service.service_arn

    def bind(self, container_instance_arn: str | None) -> TaskPlacement:
        return replace(self, container_instance_arn=container_instance_arn)


@dataclass(frozen=True)
class HostPlacement:
    """A task resolved down to the EC2 instance hosting it."""

    task: TaskPlacement
    ec2_instance_id: str

    @property
    def cluster_arn(self) -> str:
        return self.task.cluster_arn

    @property
    def service_arn(self) -> str:
        return self.task.service_arn

    @property
    def task_arn(self) -> str:
        return self.task.task_arn

    @property
    def container_instance_arn(self) -> str:
        # HostPlacement is only built for bound tasks
        return self.task.container_instance_arn or ""

    def fields(self) -> tuple[str, str, str, str, str]:
        return (
            self.cluster_arn,
            self.service_arn,
            self.task_arn,
            self.container_instance_arn,
            self.ec2_instance_id,
        )
