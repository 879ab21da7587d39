# tests/test_resolvers.py
"""
Tests for variable-source resolvers.
"""
from pathlib import Path
from types import SimpleNamespace

import pytest

from stringtags.interfaces import FieldResolver
from stringtags.resolvers import MappingResolver, ObjectResolver, as_resolver


class TestMappingResolver:
    """Test MappingResolver."""

    def test_plain_key(self):
        assert MappingResolver({"a": 1}).resolve("a") == 1

    def test_missing_key_is_none(self):
        assert MappingResolver({}).resolve("a") is None

    def test_nested_mapping(self):
        assert MappingResolver({"a": {"b": {"c": 3}}}).resolve("a.b.c") == 3

    def test_nested_object(self):
        data = {"user": SimpleNamespace(name="Ana")}
        assert MappingResolver(data).resolve("user.name") == "Ana"

    def test_literal_dotted_key_wins(self):
        data = {"a.b": "literal", "a": {"b": "nested"}}
        assert MappingResolver(data).resolve("a.b") == "literal"

    def test_list_index(self):
        data = {"items": ["x", "y"]}
        assert MappingResolver(data).resolve("items.1") == "y"
        assert MappingResolver(data).resolve("items.5") is None

    def test_unicode_digit_segment_is_none(self):
        assert MappingResolver({"items": ["a"]}).resolve("items.²") is None

    def test_methods_are_not_values(self):
        assert MappingResolver({"name": "Ana"}).resolve("name.upper") is None

    def test_traversal_through_none(self):
        assert MappingResolver({"a": None}).resolve("a.b") is None

    def test_empty_segment(self):
        assert MappingResolver({"a": {"": 1}}).resolve("a..b") is None


class TestObjectResolver:
    """Test ObjectResolver."""

    def test_attribute(self):
        assert ObjectResolver(SimpleNamespace(a=1)).resolve("a") == 1

    def test_nested_mapping_attribute(self):
        obj = SimpleNamespace(meta={"lang": "ja"})
        assert ObjectResolver(obj).resolve("meta.lang") == "ja"

    def test_missing_attribute_is_none(self):
        assert ObjectResolver(SimpleNamespace()).resolve("a.b") is None

    def test_callable_attributes_are_none(self):
        obj = SimpleNamespace(greet=lambda: "hi", name="Ana")
        assert ObjectResolver(obj).resolve("greet") is None
        assert ObjectResolver(obj).resolve("name") == "Ana"

    def test_private_attributes_are_hidden(self):
        obj = SimpleNamespace(_secret="x")
        assert ObjectResolver(obj).resolve("_secret") is None


class TestAsResolver:
    """Test as_resolver()."""

    def test_mapping(self):
        assert isinstance(as_resolver({"a": 1}), MappingResolver)

    def test_none(self):
        assert as_resolver(None).resolve("a") is None

    def test_object(self):
        assert isinstance(as_resolver(SimpleNamespace(a=1)), ObjectResolver)

    def test_existing_resolver_is_reused(self):
        class Upper(FieldResolver):
            def resolve(self, path):
                return path.upper()

        resolver = Upper()
        assert as_resolver(resolver) is resolver

    def test_objects_with_resolve_method_are_plain_objects(self):
        assert isinstance(as_resolver(Path("/tmp")), ObjectResolver)

    @pytest.mark.parametrize("value", ["text", b"bytes", 1, 2.0, False])
    def test_scalars_rejected(self, value):
        with pytest.raises(TypeError):
            as_resolver(value)
