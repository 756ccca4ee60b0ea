"""Entry point of the pod-mutation engine.

The webhook decodes the admitted pod, calls inject_auto_instru and turns the
result into a JSON patch. The pod is mutated in place and returned.
"""

import logging
from typing import Any, Dict, Optional

from auto_instru.errors import InvalidPodError
from auto_instru.languages import dispatch
from auto_instru.resolver import resolve

logger = logging.getLogger(__name__)


def inject_auto_instru(pod: Optional[Dict[str, Any]], namespace: str, container_registry: str) -> Dict[str, Any]:
    """Instrument `pod` if its annotations or labels ask for a tracer.

    `namespace` is accepted for future use. Pods without a tracer signal are
    returned untouched. Any InstrumentationError propagates to the caller; the
    pod may then be partially mutated.
    """
    if pod is None:
        raise InvalidPodError()

    language, image, should_inject = resolve(pod, container_registry)
    if not should_inject:
        return pod

    logger.info("Injecting image %s", image)
    dispatch(pod, language, image)
    return pod
