"""APM auto-instrumentation for Kubernetes pods admitted through a mutating webhook."""

from auto_instru.errors import (
    AlreadyInstrumentedError,
    EnvVarSourceError,
    InstrumentationError,
    InvalidPodError,
    LanguageNotImplementedError,
    UnsupportedLanguageError,
)
from auto_instru.mutate import inject_auto_instru

__all__ = [
    "AlreadyInstrumentedError",
    "EnvVarSourceError",
    "InstrumentationError",
    "InvalidPodError",
    "LanguageNotImplementedError",
    "UnsupportedLanguageError",
    "inject_auto_instru",
]
