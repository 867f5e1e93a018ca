"""AWS ECS service layer - handles all AWS API interactions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .core.types import HostPlacement
from .core.utils import print_info
from .features.cluster.cluster import ClusterService
from .features.host.host import HostService
from .features.service.service import ServiceService
from .features.task.task import TaskService

if TYPE_CHECKING:
    from mypy_boto3_ecs.client import ECSClient


class ECSService:
    """Service for locating ECS service tasks on their hosts."""

    def __init__(self, ecs_client: ECSClient, batch_size: int | None = None, verbose: bool = False) -> None:
        self.ecs_client = ecs_client
        self.verbose = verbose
        # Initialize feature services
        self._cluster = ClusterService(ecs_client, batch_size)
        self._service = ServiceService(ecs_client, batch_size)
        self._task = TaskService(ecs_client, batch_size)
        self._host = HostService(ecs_client, batch_size)

    def find_service_instances(self, query: str) -> list[HostPlacement]:
        """Resolve every service matching ``query`` down to the hosts running its tasks.

        Stages run strictly in order and any API error propagates, so a result is
        returned only when the whole chain resolved.
        """
        cluster_arns = self._cluster.get_cluster_arns()
        self._report(f"Found {len(cluster_arns)} clusters")

        services = self._service.search_services(query, cluster_arns)
        self._report(f"Matched {len(services)} services")
        if not services:
            return []

        tasks = self._task.resolve_tasks(services)
        self._report(f"Resolved {len(tasks)} tasks")

        hosts = self._host.resolve_hosts(tasks)
        self._report(f"Resolved {len(hosts)} hosts")
        return hosts

    def _report(self, message: str) -> None:
        if self.verbose:
            print_info(message)
