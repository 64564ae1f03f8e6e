"""Tests for the format registry and built-in codecs."""

from __future__ import annotations

import pytest

from confstore.config import StoreConfig
from confstore.errors import UnknownFormatError
from confstore.formats import Codec, FormatRegistry, json_codec, toml_codec, yaml_codec


def test_defaults_cover_json_yaml_and_toml():
    registry = FormatRegistry.with_defaults()

    assert registry.extensions() == ["json", "toml", "yaml", "yml"]
    assert registry.lookup("yaml") is registry.lookup("yml")


def test_lookup_is_case_sensitive_and_ignores_empty_extension():
    registry = FormatRegistry.with_defaults()

    assert registry.lookup("JSON") is None
    assert registry.lookup("") is None
    assert "json" in registry
    assert "xyz" not in registry


def test_get_reports_available_extensions():
    registry = FormatRegistry.with_defaults()

    with pytest.raises(UnknownFormatError) as excinfo:
        registry.get("xyz")

    assert excinfo.value.extension == "xyz"
    assert "'.xyz'" in str(excinfo.value)
    assert "json" in str(excinfo.value)


def test_register_replaces_existing_codec():
    registry = FormatRegistry.with_defaults()
    replacement = Codec(lambda data: b"", lambda raw: {})

    registry.register_codec("json", replacement)

    assert registry.lookup("json") is replacement


def test_unregister_and_copy_are_independent():
    registry = FormatRegistry.with_defaults()
    clone = registry.copy()

    registry.unregister("toml")
    registry.unregister("missing")

    assert "toml" not in registry
    assert "toml" in clone


def test_registries_do_not_share_state():
    first = FormatRegistry.with_defaults()
    second = FormatRegistry.with_defaults()

    first.register("xyz", lambda data: b"", lambda raw: {})

    assert "xyz" in first
    assert "xyz" not in second


def test_json_codec_honours_config_indent():
    registry = FormatRegistry.with_defaults(StoreConfig(application_name="demo", json_indent=None))

    assert registry.get("json").encode({"a": 1}) == b'{"a": 1}'


def test_yaml_codec_decodes_empty_document_to_mapping():
    assert yaml_codec().decode(b"") == {}


def test_yaml_codec_keeps_key_order():
    encoded = yaml_codec().encode({"b": 1, "a": 2}).decode("utf-8")

    assert encoded.index("b:") < encoded.index("a:")


def test_json_codec_keeps_unicode():
    assert json_codec().encode({"name": "Zoë"}).decode("utf-8") == '{\n  "name": "Zoë"\n}'


def test_toml_codec_drops_none_values():
    codec = toml_codec()

    decoded = codec.decode(codec.encode({"a": 1, "b": None, "nested": {"c": None, "d": "x"}}))

    assert decoded == {"a": 1, "nested": {"d": "x"}}


def test_toml_codec_rejects_non_table():
    with pytest.raises(TypeError):
        toml_codec().encode([1, 2, 3])


@pytest.mark.parametrize(("document", "expected"), [(b"[]\n", []), (b"0\n", 0), (b"false\n", False)])
def test_yaml_codec_keeps_falsy_documents(document, expected):
    assert yaml_codec().decode(document) == expected
