"""
Shared test fixtures: pods in the shape the webhook decodes them.
"""

from typing import Any, Dict

import pytest

REGISTRY = "reg.example.com"
VERSION_LABEL = "admission.datadoghq.com/java-tracer.version"
CUSTOM_IMAGE_ANNOTATION = "admission.datadoghq.com/java-tracer.custom-image"


def make_pod(labels=None, annotations=None, containers=None, init_containers=None) -> Dict[str, Any]:
    pod: Dict[str, Any] = {
        "metadata": {
            "name": "web",
            "namespace": "default",
            "labels": dict(labels or {}),
            "annotations": dict(annotations or {}),
        },
        "spec": {
            "containers": containers if containers is not None else [{"name": "app", "image": "app:1"}],
        },
    }
    if init_containers is not None:
        pod["spec"]["initContainers"] = init_containers
    return pod


@pytest.fixture
def plain_pod() -> Dict[str, Any]:
    """A pod with no tracer annotation or label."""
    return make_pod(labels={"app": "web"}, annotations={"team": "payments"})


@pytest.fixture
def java_pod() -> Dict[str, Any]:
    """A pod asking for the Java tracer through the version label."""
    return make_pod(
        labels={VERSION_LABEL: "1.2.3"},
        containers=[
            {"name": "app", "image": "app:1"},
            {"name": "sidecar", "image": "proxy:2", "env": [{"name": "LOG_LEVEL", "value": "debug"}]},
        ],
    )
