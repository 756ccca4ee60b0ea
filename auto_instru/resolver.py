"""Work out from pod metadata whether, and with which tracer image, to instrument."""

from typing import Any, Dict, NamedTuple, Optional

from auto_instru.languages import SUPPORTED_LANGUAGES

TRACER_VERSION_LABEL_KEY_FORMAT = "admission.datadoghq.com/{}-tracer.version"
CUSTOM_TRACER_ANNOTATION_KEY_FORMAT = "admission.datadoghq.com/{}-tracer.custom-image"


class InjectionDecision(NamedTuple):
    language: str
    image: str
    should_inject: bool


NO_INJECTION = InjectionDecision("", "", False)


def _metadata_map(pod: Dict[str, Any], field: str) -> Dict[str, str]:
    """Return metadata.<field> of `pod`, or an empty map when missing or null."""
    return (pod.get("metadata") or {}).get(field) or {}


def resolve(pod: Dict[str, Any], container_registry: str) -> InjectionDecision:
    """Return the injection decision for `pod`.

    Languages are checked in SUPPORTED_LANGUAGES order and the first one with a
    signal wins. For a given language the custom-image annotation is used
    verbatim; otherwise the version label selects
    `<container_registry>/apm-<lang>:<version>`. No signal means no injection.
    """
    annotations = _metadata_map(pod, "annotations")
    labels = _metadata_map(pod, "labels")

    for lang in SUPPORTED_LANGUAGES:
        image: Optional[str] = annotations.get(CUSTOM_TRACER_ANNOTATION_KEY_FORMAT.format(lang))
        if image is not None:
            return InjectionDecision(lang, image, True)

        version = labels.get(TRACER_VERSION_LABEL_KEY_FORMAT.format(lang))
        if version is not None:
            return InjectionDecision(lang, f"{container_registry}/apm-{lang}:{version}", True)

    return NO_INJECTION
