from __future__ import annotations

"""
Unit tests for the Configuration Validation Service.

Verifies default injection, lenient coercion with warnings and strict
mode failures.
"""

import pytest

from folder_tree.core.validator import validate_config
from folder_tree.domain.config import get_default_config


def test_empty_config_yields_defaults():
    clean, warnings = validate_config({})

    assert clean == get_default_config()
    assert warnings == []


def test_non_dict_falls_back_to_defaults():
    clean, warnings = validate_config(["not", "a", "dict"])

    assert clean == get_default_config()
    assert len(warnings) == 1


def test_lenient_coercions_are_reported():
    clean, warnings = validate_config({
        "indent_width": "2",
        "include_photo": "yes",
        "log_level": " debug ",
    })

    assert clean["indent_width"] == 2
    assert clean["include_photo"] is True
    assert clean["log_level"] == "DEBUG"
    assert len(warnings) == 2


def test_invalid_values_use_fallback_with_warning():
    clean, warnings = validate_config({"indent_width": -3, "style": "fancy"})

    assert clean["indent_width"] == 4
    assert clean["style"] == "plain"
    assert len(warnings) == 2


def test_unknown_keys_are_dropped():
    clean, warnings = validate_config({"colour": "red"})

    assert "colour" not in clean
    assert any("colour" in w for w in warnings)


def test_strict_mode_raises_type_error():
    with pytest.raises(TypeError):
        validate_config({"indent_width": "2"}, strict=True)


def test_strict_mode_raises_value_error():
    with pytest.raises(ValueError):
        validate_config({"style": "fancy"}, strict=True)


def test_zero_indent_is_allowed():
    clean, warnings = validate_config({"indent_width": 0}, strict=True)

    assert clean["indent_width"] == 0
    assert warnings == []
