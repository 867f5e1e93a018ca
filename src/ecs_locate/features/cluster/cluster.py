"""Cluster operations for ECS."""

from __future__ import annotations

from ...core.base import BaseAWSService
from ...core.utils import paginate_aws_list


class ClusterService(BaseAWSService):
    """Service for ECS cluster operations."""

    def get_cluster_arns(self) -> list[str]:
        return paginate_aws_list(self.ecs_client, "list_clusters", "clusterArns")
