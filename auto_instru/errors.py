"""Errors raised while instrumenting a pod.

Every error derives from InstrumentationError so the webhook can admit the pod
unmodified and report the message, whatever went wrong.
"""


class InstrumentationError(Exception):
    """Base class for pod instrumentation failures."""


class InvalidPodError(InstrumentationError):
    """No pod was given to instrument."""

    def __init__(self) -> None:
        super().__init__("cannot inject lib into a missing pod")


class UnsupportedLanguageError(InstrumentationError):
    """The language is outside the supported set."""

    def __init__(self, language: str) -> None:
        self.language = language
        super().__init__(f"language {language!r} is not supported")


class LanguageNotImplementedError(InstrumentationError):
    """The language is recognized but has no mutator yet."""

    def __init__(self, language: str) -> None:
        self.language = language
        super().__init__(f"language {language!r} is not implemented yet")


class AlreadyInstrumentedError(InstrumentationError):
    """The pod already carries the tracer init container."""

    def __init__(self, container_name: str, pod: str) -> None:
        self.container_name = container_name
        self.pod = pod
        super().__init__(f"init container {container_name!r} already exists in pod {pod!r}")


class EnvVarSourceError(InstrumentationError):
    """The activation variable is bound to valueFrom and has no literal to extend."""

    def __init__(self, container_name: str, env_name: str) -> None:
        self.container_name = container_name
        self.env_name = env_name
        super().__init__(f"{env_name} is defined via ValueFrom in container {container_name!r}")
