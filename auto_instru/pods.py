"""Small helpers over the decoded pod object graph."""

from typing import Any, Dict, List


def pod_string(pod: Dict[str, Any]) -> str:
    """Human readable pod identity for logs and errors.

    Pods created by controllers often have no name yet at admission time, so
    the generateName prefix is used instead.
    """
    meta = pod.get("metadata") or {}
    name = meta.get("name") or meta.get("generateName") or ""
    namespace = meta.get("namespace")
    if namespace:
        return f"{namespace}/{name}"
    return name


def env_index(env: List[Dict[str, Any]], name: str) -> int:
    """Position of the variable called `name` in `env`, or -1."""
    for i, var in enumerate(env):
        if var.get("name") == name:
            return i
    return -1
