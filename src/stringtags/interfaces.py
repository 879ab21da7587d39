# src/stringtags/interfaces.py
from abc import ABC, abstractmethod
from typing import Any, Optional, Protocol

from .models import TagOptions


class Translator(Protocol):
    def __call__(self, text: str, domain: Optional[str], context: Optional[str]) -> str:
        ...


class TagPopulator(Protocol):
    def __call__(self, text: str, vars: Any, options: TagOptions) -> str:
        ...


class FieldResolver(ABC):
    """
    Source of tag values.

    Implementations return the value addressed by a tag path, or None when
    the path does not resolve. They must not raise for missing fields.
    """

    @abstractmethod
    def resolve(self, path: str) -> Optional[Any]:
        """Return the value for ``path`` (``name`` or ``name.sub.field``)."""
