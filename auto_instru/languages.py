"""Map a tracer language to the strategy that instruments a pod for it."""

from enum import Enum
from types import MappingProxyType
from typing import Any, Callable, Dict, Mapping, Optional

from auto_instru import java
from auto_instru.errors import LanguageNotImplementedError, UnsupportedLanguageError

Mutator = Callable[[Dict[str, Any], str], None]


class Language(str, Enum):
    JAVA = "java"
    PYTHON = "python"
    NODE = "node"

    @classmethod
    def parse(cls, tag: str) -> Optional["Language"]:
        """Case-insensitive lookup; None for tags outside the supported set."""
        try:
            return cls(tag.lower())
        except ValueError:
            return None


# Resolution order when a pod declares more than one language.
SUPPORTED_LANGUAGES = tuple(lang.value for lang in Language)

MUTATORS: Mapping[Language, Mutator] = MappingProxyType({
    Language.JAVA: java.mutate,
})


def dispatch(pod: Dict[str, Any], language: str, image: str) -> None:
    """Instrument `pod` for `language` using the tracer `image`.

    Raises UnsupportedLanguageError for unknown tags and
    LanguageNotImplementedError for known languages without a mutator.
    """
    lang = Language.parse(language)
    if lang is None:
        raise UnsupportedLanguageError(language)

    mutator = MUTATORS.get(lang)
    if mutator is None:
        raise LanguageNotImplementedError(language)

    mutator(pod, image)
