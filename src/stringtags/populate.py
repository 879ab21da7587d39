# src/stringtags/populate.py
"""
Tag population for translated strings.

Replaces ``{name}``-style tags in a string with values from a variable
source. Tags may address subfields (``{order.total}``) and list
alternatives (``{nickname|first_name}``); the first alternative that
resolves to a non-None value is used.

Usage::

    from stringtags.populate import populate_tags

    populate_tags("Hello {name}", {"name": "Ana"})  # → "Hello Ana"

Functions:
    populate_tags: Substitute every tag in a string
    find_tags: List the tags present in a string
"""
import html
import logging
import re
from functools import lru_cache
from typing import Any, List, Mapping, Optional, Tuple, Union

from .interfaces import FieldResolver
from .models import TagOptions
from .resolvers import as_resolver

logger = logging.getLogger(__name__)

_NAME = r"([-\w.|]+)"


@lru_cache(maxsize=32)
def _tag_pattern(tag_open: str, tag_close: str) -> re.Pattern:
    if tag_close:
        return re.compile(re.escape(tag_open) + _NAME + re.escape(tag_close))
    return re.compile(re.escape(tag_open) + _NAME)


def _check_options(options: TagOptions) -> None:
    if not options.tag_open:
        raise ValueError("tag_open must be a non-empty string")


def find_tags(text: str, options: Optional[Union[TagOptions, Mapping[str, Any]]] = None) -> List[Tuple[str, str]]:
    """
    Find the tags in ``text``.

    Returns:
        ``(tag, name)`` pairs in order of first appearance, without
        duplicates, e.g. ``[("{first_name}", "first_name")]``.
    """
    opts = TagOptions.coerce(options)
    _check_options(opts)
    seen = {}
    for match in _tag_pattern(opts.tag_open, opts.tag_close).finditer(text):
        seen.setdefault(match.group(0), match.group(1))
    return list(seen.items())


def _resolve_name(resolver: FieldResolver, name: str) -> Optional[Any]:
    for candidate in name.split('|'):
        if not candidate:
            continue
        value = resolver.resolve(candidate)
        if value is not None:
            return value
    return None


def _render(value: Any, options: TagOptions) -> str:
    text = str(value)
    if options.entity_encode:
        text = html.escape(text, quote=True)
    if options.entity_decode:
        text = html.unescape(text)
    return text


def _populate(text: str, resolver: FieldResolver, options: TagOptions, depth: int = 1) -> str:
    def _replace(match: re.Match) -> str:
        value = _resolve_name(resolver, match.group(1))
        if value is None:
            logger.debug("Tag %s did not resolve", match.group(0))
            return "" if options.remove_null_tags else match.group(0)
        rendered = _render(value, options)
        if not options.recursive or options.tag_open not in rendered:
            return rendered
        if depth >= options.max_depth:
            logger.warning("Stopped populating tags in %s after %d levels", match.group(0), depth)
            return rendered
        return _populate(rendered, resolver, options, depth + 1)

    return _tag_pattern(options.tag_open, options.tag_close).sub(_replace, text)


def populate_tags(
    text: str,
    vars: Any,
    options: Optional[Union[TagOptions, Mapping[str, Any]]] = None,
) -> str:
    """
    Replace the tags in ``text`` with values pulled from ``vars``.

    Args:
        text: String containing tags.
        vars: Mapping, object or :class:`FieldResolver` to pull values from.
        options: :class:`TagOptions` or a mapping of overrides
            (``tagOpen``, ``removeNullTags`` ...). Defaults come from config.

    Returns:
        ``text`` with every resolved tag replaced. Tags that resolve to None
        are removed, or kept as written when ``remove_null_tags`` is off.
        With ``recursive``, tags inside a substituted value are populated
        too, nested at most ``max_depth`` levels deep. Text around the value
        is never re-scanned.

    Raises:
        TypeError: If ``vars`` is not a usable variable source.
        ValueError: If ``tag_open`` is empty.
    """
    opts = TagOptions.coerce(options)
    _check_options(opts)
    resolver = as_resolver(vars)

    if not text or opts.tag_open not in text:
        return text
    if opts.tag_close and opts.tag_close not in text:
        return text

    return _populate(text, resolver, opts)
