# tests/test_translate.py
"""
Tests for translate_and_populate().
"""
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from stringtags import TagOptions, translate_and_populate
from stringtags.i18n import register_catalog, set_locale


class TestTranslateAndPopulate:
    """End-to-end behaviour with the default collaborators."""

    def test_untranslated_text_without_tags_is_unchanged(self):
        assert translate_and_populate("Plain text", {"name": "Ana"}) == "Plain text"

    def test_untranslated_text_is_populated(self):
        assert translate_and_populate("Hello {name}", {"name": "Ana"}) == "Hello Ana"

    def test_translation_is_populated(self):
        register_catalog("ja", "greetings", {"Hello {name}": "{name}さん、こんにちは"})
        set_locale("ja")
        result = translate_and_populate("Hello {name}", {"name": "Ana"}, text_domain="greetings")
        assert result == "Anaさん、こんにちは"

    def test_domain_defaults_to_calling_module(self):
        register_catalog("ja", __name__, {"Bye {name}": "さようなら {name}"})
        result = translate_and_populate("Bye {name}", {"name": "Ana"}, lang="ja")
        assert result == "さようなら Ana"

    def test_context(self):
        register_catalog("ja", "shop", {"Open {what}": "{what}を開く"}, context="verb")
        result = translate_and_populate(
            "Open {what}", {"what": "ファイル"}, "verb", "shop", lang="ja",
        )
        assert result == "ファイルを開く"
        assert translate_and_populate(
            "Open {what}", {"what": "file"}, None, "shop", lang="ja",
        ) == "Open file"

    def test_object_vars_with_subfields_and_or_tags(self):
        user = SimpleNamespace(nickname=None, profile=SimpleNamespace(name="Ana"))
        result = translate_and_populate("Hi {nickname|profile.name}", user)
        assert result == "Hi Ana"

    def test_missing_tag_removed(self):
        assert translate_and_populate("Hello {name}!", {}) == "Hello !"

    def test_missing_tag_kept(self):
        result = translate_and_populate("Hello {name}!", {}, options={"removeNullTags": False})
        assert result == "Hello {name}!"

    def test_options_record(self):
        options = TagOptions(tag_open="[[", tag_close="]]", entity_encode=True)
        result = translate_and_populate("<b>[[v]]</b> {v}", {"v": "a<b"}, options=options)
        assert result == "<b>a&lt;b</b> {v}"


class TestCollaborators:
    """Injected translator and populator."""

    def test_translator_receives_text_domain_and_context(self):
        translator = MagicMock(return_value="Hallo {name}")
        result = translate_and_populate(
            "Hello {name}", {"name": "Ana"}, "greeting", "app", translator=translator,
        )
        translator.assert_called_once_with("Hello {name}", "app", "greeting")
        assert result == "Hallo Ana"

    def test_translator_receives_inferred_domain(self):
        translator = MagicMock(side_effect=lambda text, domain, context: text)
        translate_and_populate("Hello", {}, translator=translator)
        translator.assert_called_once_with("Hello", __name__, None)

    def test_populator_receives_localized_text_and_options(self):
        populator = MagicMock(return_value="done")
        variables = {"name": "Ana"}
        result = translate_and_populate(
            "Hello {name}", variables, options={"recursive": True}, populator=populator,
        )
        assert result == "done"
        text, vars_arg, options = populator.call_args.args
        assert text == "Hello {name}"
        assert vars_arg is variables
        assert options.recursive is True

    def test_populator_errors_propagate(self):
        populator = MagicMock(side_effect=TypeError("bad vars"))
        with pytest.raises(TypeError, match="bad vars"):
            translate_and_populate("Hello", 5, populator=populator)
