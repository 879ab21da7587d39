# src/stringtags/translate.py
"""
Translate a string, then populate its tags.

An alternative to formatting translated strings by hand::

    from stringtags import translate_and_populate

    translate_and_populate("Hello {name}", {"name": "Ana"})  # → "Hello Ana"

The translation is looked up first, so translators see and may move the tags
(``"{name} さん、こんにちは"``), and values are substituted afterwards.
"""
from typing import Any, Mapping, Optional, Union

from . import i18n
from .i18n import caller_domain
from .interfaces import TagPopulator, Translator
from .models import TagOptions
from .populate import populate_tags


def translate_and_populate(
    text: str,
    vars: Any,
    context: Optional[str] = None,
    text_domain: Optional[str] = None,
    options: Optional[Union[TagOptions, Mapping[str, Any]]] = None,
    *,
    lang: Optional[str] = None,
    translator: Optional[Translator] = None,
    populator: Optional[TagPopulator] = None,
) -> str:
    """
    Translate ``text`` and replace its tags with values from ``vars``.

    Args:
        text: Source text, e.g. ``"Hello {first_name}"``.
        vars: Mapping or object to pull tag values from. Subfield tags
            (``{order.total}``) and OR tags (``{nickname|first_name}``) are
            supported for both.
        context: Context name for texts with several translations.
        text_domain: Textdomain of ``text``. Defaults to the calling module.
        options: :class:`TagOptions` or a mapping of overrides
            (``tagOpen``, ``tagClose``, ``recursive``, ``removeNullTags``,
            ``entityEncode``, ``entityDecode``).
        lang: Locale to translate into instead of the active one.
        translator: Replaces the catalog lookup; called as
            ``translator(text, domain, context)``.
        populator: Replaces :func:`populate_tags`; called as
            ``populator(text, vars, options)``.

    Returns:
        Translated and populated text, or the populated source text when no
        translation is available.
    """
    if text_domain is None:
        text_domain = caller_domain(2)
    opts = TagOptions.coerce(options)

    if translator is None:
        localized = i18n.translate(text, text_domain, context, lang=lang)
    else:
        localized = translator(text, text_domain, context)

    return (populator or populate_tags)(localized, vars, opts)
