# src/stringtags/main.py
"""
Command-line interface for stringtags.

Translates a string with the loaded catalogs and populates its tags with
values given on the command line or in a JSON file::

    stringtags "Hello {name}" --var name=Ana
    stringtags "Hello {name}" --vars-json user.json --catalog ja.json --lang ja
"""
import argparse
import json
import logging
import sys
from typing import Dict, List, Optional

from stringtags.config import config
from stringtags.i18n import get_system_language, load_catalog_dir, load_catalog_file, set_locale
from stringtags.models import TagOptions
from stringtags.translate import translate_and_populate


def _parse_vars(pairs: List[str]) -> Dict[str, str]:
    values = {}
    for pair in pairs:
        name, sep, value = pair.partition('=')
        if not sep or not name:
            raise ValueError(f"Invalid --var {pair!r}, expected NAME=VALUE")
        values[name] = value
    return values


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stringtags",
        description="Translate a string and populate its {tags}",
    )
    parser.add_argument("text", help="Source text, e.g. 'Hello {name}'")

    # Variable sources
    parser.add_argument("--var", action="append", default=[], metavar="NAME=VALUE",
                        help="Tag value (repeatable)")
    parser.add_argument("--vars-json", metavar="FILE",
                        help="JSON object to pull tag values from; --var entries override it")

    # Translation options
    parser.add_argument("--context", help="Translation context")
    parser.add_argument("--domain", default="", help="Textdomain of the text (default: the empty domain)")
    parser.add_argument("--lang", default="default",
                        help="Target locale ('default' detects the system language)")
    parser.add_argument("--catalog", action="append", default=[], metavar="FILE",
                        help="JSON catalog file to load (repeatable)")
    parser.add_argument("--catalog-dir", metavar="DIR",
                        help="Directory of JSON catalogs (defaults to config)")

    # Tag options
    parser.add_argument("--tag-open", help="Opening tag marker")
    parser.add_argument("--tag-close", help="Closing tag marker")
    parser.add_argument("--recursive", action="store_true", default=None,
                        help="Populate tags inside substituted values")
    parser.add_argument("--keep-null-tags", action="store_true",
                        help="Leave unresolved tags in the output")
    parser.add_argument("--entity-encode", action="store_true", default=None,
                        help="HTML-escape substituted values")
    parser.add_argument("--entity-decode", action="store_true", default=None,
                        help="Unescape HTML entities in substituted values")

    parser.add_argument("--log-level", default=config.get('logging', 'log_level', 'WARNING'),
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'])
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Entry point for the ``stringtags`` command.

    Returns:
        Process exit status: 0 on success, 1 when an input could not be read.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        catalog_dir = args.catalog_dir or config.get('translation', 'catalog_dir')
        if catalog_dir:
            load_catalog_dir(catalog_dir)
        for path in args.catalog:
            load_catalog_file(path)

        variables = {}
        if args.vars_json:
            with open(args.vars_json, 'r', encoding='utf-8') as f:
                variables = json.load(f)
            if not isinstance(variables, dict):
                raise ValueError(f"{args.vars_json} must contain a JSON object")
        variables.update(_parse_vars(args.var))
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    target_lang = args.lang
    if target_lang == 'default':
        target_lang = get_system_language()
    set_locale(target_lang)

    overrides = {
        'tag_open': args.tag_open,
        'tag_close': args.tag_close,
        'recursive': args.recursive,
        'entity_encode': args.entity_encode,
        'entity_decode': args.entity_decode,
    }
    if args.keep_null_tags:
        overrides['remove_null_tags'] = False
    options = TagOptions.from_mapping({k: v for k, v in overrides.items() if v is not None})

    try:
        result = translate_and_populate(
            args.text, variables, args.context, args.domain, options,
        )
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
