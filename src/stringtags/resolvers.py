# src/stringtags/resolvers.py
"""
Variable sources for tag population.

A tag name such as ``first_name`` or ``order.customer.email`` is resolved
against the caller's variables through a :class:`FieldResolver`. Dotted
names are subfield paths; each segment is looked up on the value produced by
the previous one.

Classes:
    MappingResolver: Resolves paths against a mapping
    ObjectResolver: Resolves paths against an object's attributes

Functions:
    as_resolver: Pick the resolver for an arbitrary variable source
"""
from numbers import Number
from typing import Any, Mapping, Optional

from .interfaces import FieldResolver

_MISSING = object()


def _lookup(value: Any, name: str) -> Any:
    """Look up one path segment by key first, then by attribute."""
    if isinstance(value, Mapping):
        return value.get(name, _MISSING)
    if isinstance(value, (list, tuple)) and name.isdecimal():
        index = int(name)
        return value[index] if index < len(value) else _MISSING
    if name.startswith('_'):
        return _MISSING
    attr = getattr(value, name, _MISSING)
    # methods and functions are not field values
    if callable(attr):
        return _MISSING
    return attr


def _walk(root: Any, path: str) -> Optional[Any]:
    value = root
    for segment in path.split('.'):
        if value is None or not segment:
            return None
        value = _lookup(value, segment)
        if value is _MISSING:
            return None
    return value


class MappingResolver(FieldResolver):
    """Resolve tag paths against a mapping."""

    def __init__(self, data: Mapping[str, Any]):
        self.data = data

    def resolve(self, path: str) -> Optional[Any]:
        # a literal dotted key wins over subfield traversal
        if path in self.data:
            return self.data[path]
        return _walk(self.data, path)


class ObjectResolver(FieldResolver):
    """Resolve tag paths against an object's public attributes."""

    def __init__(self, obj: Any):
        self.obj = obj

    def resolve(self, path: str) -> Optional[Any]:
        return _walk(self.obj, path)


def as_resolver(vars: Any) -> FieldResolver:
    """
    Wrap a variable source in the matching resolver.

    Args:
        vars: A mapping, a :class:`FieldResolver`, any other object
            (attributes are used) or None for no variables.

    Returns:
        A resolver for ``vars``.

    Raises:
        TypeError: If ``vars`` is a string, bytes or a number.
    """
    if vars is None:
        return MappingResolver({})
    if isinstance(vars, Mapping):
        return MappingResolver(vars)
    if isinstance(vars, (str, bytes, bytearray, Number)):
        raise TypeError(
            f"Unsupported variable source {type(vars).__name__!r}; "
            "expected a mapping or an object"
        )
    if isinstance(vars, FieldResolver):
        return vars
    return ObjectResolver(vars)
