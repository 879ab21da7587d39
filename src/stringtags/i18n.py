# src/stringtags/i18n.py
"""
Translation catalog for stringtags.

Translations are registered per locale and per *textdomain* (the namespace a
string belongs to, by default the module that uses it) and may be further
split by a *context* when one source string needs different translations.
Lookups that find nothing return the source text unchanged.

Usage::

    from stringtags.i18n import register_catalog, set_locale, translate

    register_catalog("ja", "shop.cart", {"Checkout": "レジに進む"})
    set_locale("ja")
    translate("Checkout", "shop.cart")  # → "レジに進む"

Catalog files are JSON::

    {
        "locale": "ja",
        "domain": "shop.cart",
        "translations": [
            {"text": "Checkout", "translation": "レジに進む"},
            {"text": "Open", "context": "verb", "translation": "開く"}
        ]
    }
"""
from __future__ import annotations

import json
import locale
import logging
import os
import sys
import threading
from pathlib import Path
from typing import Mapping, Optional, Union

from .config import config

logger = logging.getLogger(__name__)

# ── thread-safe global locale ──────────────────────────────────────────────

_lock = threading.Lock()
_locale: str = config.get('translation', 'default_locale', 'en')

# locale -> domain -> (context, source text) -> translation
_CATALOGS: dict[str, dict[str, dict[tuple[Optional[str], str], str]]] = {}


def _default_locale() -> str:
    return config.get('translation', 'default_locale', 'en')


def set_locale(lang: str) -> None:
    """Set the active locale; unknown locales fall back to the default."""
    global _locale
    default = _default_locale()
    with _lock:
        _locale = lang if lang and (lang in _CATALOGS or lang == default) else default


def get_locale() -> str:
    """Return the current locale code."""
    with _lock:
        return _locale


def available_locales() -> list[str]:
    """Return the locales that have at least one registered catalog."""
    with _lock:
        return sorted(_CATALOGS)


# ═══════════════════════════════════════════════════════════════════════════
#  Catalog registry
# ═══════════════════════════════════════════════════════════════════════════

def _add(lang: str, domain: str, entries: dict[tuple[Optional[str], str], str]) -> None:
    with _lock:
        _CATALOGS.setdefault(lang, {}).setdefault(domain, {}).update(entries)


def register_catalog(
    lang: str,
    domain: str,
    translations: Mapping[str, str],
    context: Optional[str] = None,
) -> None:
    """
    Register translations for one locale and textdomain.

    Args:
        lang: Locale code the translations are written in.
        domain: Textdomain the source strings belong to.
        translations: ``{source text: translated text}``.
        context: Context shared by every entry in ``translations``.
    """
    _add(lang, domain, {(context, text): value for text, value in translations.items()})


def clear_catalogs() -> None:
    """Forget every registered translation."""
    with _lock:
        _CATALOGS.clear()


def load_catalog_file(path: Union[str, Path]) -> int:
    """
    Load one JSON catalog file into the registry.

    Returns:
        Number of translations loaded.

    Raises:
        OSError: If the file cannot be read.
        ValueError: If the file is not a valid catalog.
    """
    path = Path(path)
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValueError(f"Catalog {path} must contain a JSON object")
    lang = data.get('locale')
    domain = data.get('domain')
    items = data.get('translations')
    if not isinstance(lang, str) or not isinstance(domain, str) or not isinstance(items, list):
        raise ValueError(f"Catalog {path} must define 'locale', 'domain' and 'translations'")

    entries = {}
    for item in items:
        if not isinstance(item, dict) or not isinstance(item.get('text'), str) \
                or not isinstance(item.get('translation'), str) \
                or not isinstance(item.get('context'), (str, type(None))):
            raise ValueError(f"Catalog {path} has an invalid entry: {item!r}")
        entries[(item.get('context'), item['text'])] = item['translation']

    _add(lang, domain, entries)
    logger.info("Loaded %d %s translations for %r from %s", len(entries), lang, domain, path)
    return len(entries)


def load_catalog_dir(directory: Union[str, Path]) -> int:
    """Load every ``*.json`` catalog in ``directory``; returns the total count."""
    directory = Path(directory)
    if not directory.is_dir():
        logger.warning("Catalog path %s is not a directory", directory)
        return 0
    return sum(load_catalog_file(p) for p in sorted(directory.glob('*.json')))


# ═══════════════════════════════════════════════════════════════════════════
#  Lookup
# ═══════════════════════════════════════════════════════════════════════════

def caller_domain(stacklevel: int = 1) -> str:
    """
    Return the textdomain of a function on the call stack.

    ``stacklevel=1`` is the function calling :func:`caller_domain`, 2 is its
    caller and so on. The domain is the module's ``__name__``, or the file
    stem for a script run as ``__main__``.
    """
    try:
        frame = sys._getframe(stacklevel)
    except ValueError:
        return ''
    module = frame.f_globals.get('__name__', '')
    if module == '__main__':
        return Path(frame.f_globals.get('__file__') or frame.f_code.co_filename).stem
    return module


def translate(
    text: str,
    domain: Optional[str] = None,
    context: Optional[str] = None,
    lang: Optional[str] = None,
    stacklevel: int = 1,
) -> str:
    """
    Look up the translation of ``text``.

    Args:
        text: Source text.
        domain: Textdomain; inferred from the caller's module when None.
        context: Disambiguates identical source texts.
        lang: Override locale for this call only.
        stacklevel: Which caller to infer the domain from, as for
            :func:`caller_domain` (1 is the caller of ``translate``).

    Returns:
        The translated string, or ``text`` itself if not found.
    """
    if domain is None:
        domain = caller_domain(stacklevel + 1)
    active = lang or get_locale()
    translation = _CATALOGS.get(active, {}).get(domain, {}).get((context, text))
    if not translation:
        logger.debug("No %s translation in %r for %r", active, domain, text)
        return text
    return translation


def get_system_language() -> str:
    """
    Detect the user's language code (``'ja'``, ``'en'`` ...).

    Prefers environment variables, then the locale configured for the
    process, then the configured default locale.
    """
    for var in ("LC_ALL", "LANG", "LANGUAGE"):
        lang = _language_code(os.environ.get(var))
        if lang:
            return lang

    try:
        locale.setlocale(locale.LC_ALL, "")
    except locale.Error:
        # If setting locale fails, continue with current settings
        pass
    return _language_code(locale.getlocale()[0]) or _default_locale()


def _language_code(value: Optional[str]) -> Optional[str]:
    """``'ja_JP.UTF-8'`` → ``'ja'``; None for empty, C and POSIX locales."""
    if not value:
        return None
    code = value.split(':')[0].split('.')[0].replace('-', '_').split('_')[0].lower()
    if not code or code in ('c', 'posix'):
        return None
    return code
