"""Java tracer injection.

The tracer image runs as an init container that copies dd-java-agent.jar into
an emptyDir volume shared with every application container, and each container
gets `-javaagent` added to JAVA_TOOL_OPTIONS so the JVM loads it at startup.

Edits are applied in place and are not rolled back: if a later container fails,
the init container, the volume and earlier containers stay mutated.
"""

import logging
from typing import Any, Dict, List

from auto_instru.errors import AlreadyInstrumentedError, EnvVarSourceError
from auto_instru.pods import env_index, pod_string

logger = logging.getLogger(__name__)

VOLUME_NAME = "datadog-auto-instrumentation"
MOUNT_PATH = "/datadog"
INIT_CONTAINER_NAME = "datadog-tracer-init"
JAVA_TOOL_OPTIONS_KEY = "JAVA_TOOL_OPTIONS"
JAVA_TOOL_OPTIONS_VALUE = " -javaagent:/datadog/dd-java-agent.jar"


def _volume_mount() -> Dict[str, str]:
    """Mount of the shared tracer volume."""
    return {"name": VOLUME_NAME, "mountPath": MOUNT_PATH}


def _list_field(obj: Dict[str, Any], key: str) -> List[Any]:
    """Return obj[key] as a list, creating it when missing or null."""
    if obj.get(key) is None:
        obj[key] = []
    return obj[key]


def _spec(pod: Dict[str, Any]) -> Dict[str, Any]:
    """Return pod["spec"], creating it when missing or null."""
    if pod.get("spec") is None:
        pod["spec"] = {}
    return pod["spec"]


def inject_init_container(pod: Dict[str, Any], image: str) -> None:
    """Add the tracer init container, refusing pods that already have one."""
    pod_str = pod_string(pod)
    logger.debug("Injecting init container named %r with image %r into pod %s", INIT_CONTAINER_NAME, image, pod_str)

    spec = _spec(pod)
    init_containers = _list_field(spec, "initContainers")
    for container in init_containers:
        if container.get("name") == INIT_CONTAINER_NAME:
            raise AlreadyInstrumentedError(INIT_CONTAINER_NAME, pod_str)

    init_containers.append({
        "name": INIT_CONTAINER_NAME,
        "image": image,
        "command": ["sh", "copy-javaagent.sh", MOUNT_PATH],
        "volumeMounts": [_volume_mount()],
    })


def inject_config(pod: Dict[str, Any]) -> None:
    """Declare the shared volume, then mount it and set JAVA_TOOL_OPTIONS in every container."""
    spec = _spec(pod)
    _list_field(spec, "volumes").append({"name": VOLUME_NAME, "emptyDir": {}})

    for container in _list_field(spec, "containers"):
        env = _list_field(container, "env")
        index = env_index(env, JAVA_TOOL_OPTIONS_KEY)
        if index < 0:
            env.append({"name": JAVA_TOOL_OPTIONS_KEY, "value": JAVA_TOOL_OPTIONS_VALUE})
        else:
            existing = env[index]
            if existing.get("valueFrom") is not None:
                raise EnvVarSourceError(container.get("name", ""), JAVA_TOOL_OPTIONS_KEY)
            existing["value"] = (existing.get("value") or "") + JAVA_TOOL_OPTIONS_VALUE

        _list_field(container, "volumeMounts").append(_volume_mount())


def mutate(pod: Dict[str, Any], image: str) -> None:
    """Inject the Java tracer: init container first, then volume, mounts and JAVA_TOOL_OPTIONS."""
    inject_init_container(pod, image)
    inject_config(pod)
