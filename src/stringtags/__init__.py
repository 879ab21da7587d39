# src/stringtags/__init__.py
"""
stringtags - translate strings and fill in their tags.

Used as an alternative to ``%``/``str.format`` in translatable strings that
need variables: the string is translated first, then tags such as
``{first_name}`` are replaced with values from a mapping or an object.

Main Components:
- translate: translate_and_populate(), the entry point
- i18n: Translation catalogs, active locale and textdomain inference
- populate: Tag substitution with subfield and OR tags
- resolvers: Value lookup on mappings and objects
- models: TagOptions
- config: Configuration management
"""
from .models import TagOptions
from .populate import find_tags, populate_tags
from .translate import translate_and_populate

__version__ = "1.0.0"
__author__ = "stringtags Team"
__description__ = "Translate strings and populate their {tags}"

__all__ = ["TagOptions", "find_tags", "populate_tags", "translate_and_populate"]
