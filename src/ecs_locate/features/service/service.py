"""Service operations for ECS."""

from __future__ import annotations

from collections.abc import Iterable

from ...core.base import BaseAWSService
from ...core.types import ServiceMatch
from ...core.utils import paginate_aws_list


class ServiceService(BaseAWSService):
    """Service for ECS service operations."""

    def get_service_arns(self, cluster_arn: str) -> list[str]:
        return paginate_aws_list(self.ecs_client, "list_services", "serviceArns", cluster=cluster_arn)

    def search_services(self, query: str, cluster_arns: Iterable[str]) -> list[ServiceMatch]:
        """Find services whose ARN contains ``query``, across the given clusters.

        Matching is a case-sensitive substring test on the full service ARN. Every
        cluster's listing is exhausted before the result is returned.
        """
        matches: list[ServiceMatch] = []
        for cluster_arn in cluster_arns:
            for service_arn in self.get_service_arns(cluster_arn):
                if query in service_arn:
                    matches.append(ServiceMatch(cluster_arn=cluster_arn, service_arn=service_arn))
        return matches
