"""Tests for the dict/YAML config loader."""

import sys, os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import pytest

from secret_shield import InvalidConfiguration, RedactionStyle, Sensitivity, ShieldConfig
from secret_shield.config import load_config, load_from_yaml


def test_none_gives_defaults():
    assert load_config(None) == ShieldConfig()


def test_flat_snake_case():
    cfg = load_config({
        "redaction_style": "full",
        "sensitivity": "lenient",
        "show_diff": True,
        "allow_list": ["sk_test_*"],
    })
    assert cfg.redaction_style is RedactionStyle.FULL
    assert cfg.sensitivity is Sensitivity.LENIENT
    assert cfg.show_diff is True
    assert cfg.allow_list == ("sk_test_*",)


def test_nested_camel_case():
    cfg = load_config({"secretshield": {
        "redactionStyle": "placeholder",
        "showConfirmation": True,
        "denyList": ["*prod*"],
        "interceptAllCopy": False,
    }})
    assert cfg.redaction_style is RedactionStyle.PLACEHOLDER
    assert cfg.show_confirmation is True
    assert cfg.deny_list == ("*prod*",)
    assert cfg.intercept_all_copy is False


def test_unknown_enum_values_fall_back():
    cfg = load_config({"redaction_style": "glitter", "sensitivity": "paranoid"})
    assert cfg.redaction_style is RedactionStyle.PARTIAL
    assert cfg.sensitivity is Sensitivity.BALANCED


def test_allow_list_must_be_a_list():
    with pytest.raises(InvalidConfiguration):
        load_config({"allow_list": "sk_test_*"})


def test_list_entries_must_be_strings():
    with pytest.raises(InvalidConfiguration):
        load_config({"deny_list": ["ok", 3]})


def test_flags_must_be_bool():
    with pytest.raises(InvalidConfiguration):
        load_config({"show_diff": "yes"})


def test_document_must_be_a_mapping():
    with pytest.raises(InvalidConfiguration):
        load_config(["partial"])


def test_load_from_yaml(tmp_path):
    path = tmp_path / "shield.yaml"
    path.write_text(
        "secret_shield:\n"
        "  redaction_style: labeled\n"
        "  sensitivity: strict\n"
        "  allow_list:\n"
        "    - AKIA*EXAMPLE\n"
    )
    cfg = load_from_yaml(path)
    assert cfg.redaction_style is RedactionStyle.LABELED
    assert cfg.sensitivity is Sensitivity.STRICT
    assert cfg.allow_list == ("AKIA*EXAMPLE",)


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    assert load_from_yaml(path) == ShieldConfig()


def test_broken_yaml_is_invalid_configuration(tmp_path):
    path = tmp_path / "broken.yaml"
    path.write_text("secret_shield: [unclosed\n")
    with pytest.raises(InvalidConfiguration):
        load_from_yaml(path)


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
