# src/stringtags/models.py
"""
Data models for stringtags.

Classes:
    TagOptions: Delimiters and substitution switches used by the tag populator
"""
from dataclasses import dataclass, fields, replace
from typing import Any, Mapping, Optional, Union

from .config import config

# camelCase option names accepted alongside the field names
_CAMEL_KEYS = {
    'tagOpen': 'tag_open',
    'tagClose': 'tag_close',
    'recursive': 'recursive',
    'removeNullTags': 'remove_null_tags',
    'entityEncode': 'entity_encode',
    'entityDecode': 'entity_decode',
    'maxDepth': 'max_depth',
}


def _default(key: str, fallback: Any) -> Any:
    return config.get('tags', key, fallback)


@dataclass(frozen=True)
class TagOptions:
    """
    Settings that control how tags are found and replaced.

    Attributes:
        tag_open (str): Opening tag marker, ``{`` by default
        tag_close (str): Closing tag marker, ``}`` by default. May be empty,
            in which case a tag ends at the first non-name character
        recursive (bool): Populate tags found inside substituted values
        remove_null_tags (bool): Drop tags that resolve to None; when False
            the tag is left in the output as written
        entity_encode (bool): HTML-escape substituted values
        entity_decode (bool): Unescape HTML entities in substituted values
        max_depth (int): How deeply tags inside values are populated
    """
    tag_open: str = '{'
    tag_close: str = '}'
    recursive: bool = False
    remove_null_tags: bool = True
    entity_encode: bool = False
    entity_decode: bool = False
    max_depth: int = 10

    @classmethod
    def defaults(cls) -> 'TagOptions':
        """Build options from the ``[tags]`` configuration section."""
        return cls(
            tag_open=_default('tag_open', '{'),
            tag_close=_default('tag_close', '}'),
            recursive=_default('recursive', False),
            remove_null_tags=_default('remove_null_tags', True),
            entity_encode=_default('entity_encode', False),
            entity_decode=_default('entity_decode', False),
            max_depth=_default('max_depth', 10),
        )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'TagOptions':
        """
        Build options from a mapping of overrides.

        Accepts camelCase keys (``tagOpen``, ``removeNullTags`` ...) as well
        as the snake_case field names. Unrecognized keys are ignored and
        anything not given keeps its configured default.
        """
        known = {f.name for f in fields(cls)}
        overrides = {}
        for key, value in data.items():
            name = _CAMEL_KEYS.get(key, key)
            if name in known:
                overrides[name] = value
        return replace(cls.defaults(), **overrides)

    @classmethod
    def coerce(cls, options: Optional[Union['TagOptions', Mapping[str, Any]]]) -> 'TagOptions':
        if options is None:
            return cls.defaults()
        if isinstance(options, cls):
            return options
        return cls.from_mapping(options)
