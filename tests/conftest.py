"""Shared pytest fixtures for tests."""

from unittest.mock import Mock

import pytest

CLUSTER_A = "arn:aws:ecs:us-east-1:123456789012:cluster/alpha"
CLUSTER_B = "arn:aws:ecs:us-east-1:123456789012:cluster/beta"


def service_arn(cluster: str, name: str) -> str:
    return f"arn:aws:ecs:us-east-1:123456789012:service/{cluster}/{name}"


def task_arn(cluster: str, task_id: str) -> str:
    return f"arn:aws:ecs:us-east-1:123456789012:task/{cluster}/{task_id}"


def container_instance_arn(cluster: str, instance_id: str) -> str:
    return f"arn:aws:ecs:us-east-1:123456789012:container-instance/{cluster}/{instance_id}"


@pytest.fixture
def mock_paginated_client():
    def _create_client(pages: list[dict]) -> Mock:
        client = Mock()
        paginator = Mock()
        paginator.paginate.return_value = pages
        client.get_paginator.return_value = paginator
        return client

    return _create_client


@pytest.fixture
def mock_ecs_client():
    return Mock()


@pytest.fixture
def mock_inventory_client():
    """Build a Mock ECS client serving a fixed inventory.

    ``clusters`` maps cluster ARN -> service ARN -> task ARNs. ``task_instances`` maps task
    ARN -> container instance ARN (omit a task to model Fargate). ``instance_hosts`` maps
    container instance ARN -> EC2 instance id.
    """

    def _create_client(
        clusters: dict[str, dict[str, list[str]]],
        task_instances: dict[str, str] | None = None,
        instance_hosts: dict[str, str] | None = None,
    ) -> Mock:
        task_instances = task_instances or {}
        instance_hosts = instance_hosts or {}

        def _pages(operation_name: str, **kwargs: str) -> list[dict]:
            if operation_name == "list_clusters":
                return [{"clusterArns": list(clusters)}]
            if operation_name == "list_services":
                return [{"serviceArns": list(clusters[kwargs["cluster"]])}]
            if operation_name == "list_tasks":
                return [{"taskArns": list(clusters[kwargs["cluster"]][kwargs["serviceName"]])}]
            raise AssertionError(f"unexpected paginator {operation_name}")

        def _get_paginator(operation_name: str) -> Mock:
            paginator = Mock()
            paginator.paginate.side_effect = lambda **kwargs: _pages(operation_name, **kwargs)
            return paginator

        def _describe_tasks(cluster: str, tasks: list[str]) -> dict:
            described = []
            for arn in tasks:
                task = {"taskArn": arn, "clusterArn": cluster, "lastStatus": "RUNNING"}
                if arn in task_instances:
                    task["containerInstanceArn"] = task_instances[arn]
                described.append(task)
            return {"tasks": described, "failures": []}

        def _describe_container_instances(cluster: str, containerInstances: list[str]) -> dict:  # noqa: N803
            return {
                "containerInstances": [
                    {"containerInstanceArn": arn, "ec2InstanceId": instance_hosts[arn]}
                    for arn in containerInstances
                    if arn in instance_hosts
                ],
                "failures": [
                    {"arn": arn, "reason": "MISSING"} for arn in containerInstances if arn not in instance_hosts
                ],
            }

        client = Mock()
        client.get_paginator.side_effect = _get_paginator
        client.describe_tasks.side_effect = _describe_tasks
        client.describe_container_instances.side_effect = _describe_container_instances
        return client

    return _create_client


@pytest.fixture
def billing_inventory(mock_inventory_client):
    """Two clusters; one billing service in alpha with two tasks on two hosts, nothing matching in beta."""
    billing = service_arn("alpha", "billing-api")
    task_1 = task_arn("alpha", "task-1")
    task_2 = task_arn("alpha", "task-2")
    instance_1 = container_instance_arn("alpha", "ci-1")
    instance_2 = container_instance_arn("alpha", "ci-2")

    return mock_inventory_client(
        {
            CLUSTER_A: {billing: [task_1, task_2], service_arn("alpha", "web"): [task_arn("alpha", "task-3")]},
            CLUSTER_B: {service_arn("beta", "worker"): [task_arn("beta", "task-4")]},
        },
        task_instances={
            task_1: instance_1,
            task_2: instance_2,
            task_arn("alpha", "task-3"): instance_1,
            task_arn("beta", "task-4"): container_instance_arn("beta", "ci-9"),
        },
        instance_hosts={
            instance_1: "i-0000000000000aaa1",
            instance_2: "i-0000000000000aaa2",
            container_instance_arn("beta", "ci-9"): "i-0000000000000bbb9",
        },
    )
