# tests/core/config/test_schema.py
"""
Testes do registro de opções.

Garantem que o registro é a única fonte de nomes de opção e que os
defaults seguem o tipo de cada opção.
"""

import pytest

from bluetuith.core.config.schema import (
    OPTIONS,
    OptionDescriptor,
    OptionKind,
    get_option,
    option_index,
)

EXPECTED_NAMES = [
    "list-adapters",
    "adapter",
    "receive-dir",
    "gsm-apn",
    "gsm-number",
    "adapter-states",
    "connect-bdaddr",
    "theme",
    "no-warning",
    "no-help-display",
    "confirm-on-quit",
    "generate",
    "version",
]


def test_registry_order_and_names():
    assert [o.name for o in OPTIONS] == EXPECTED_NAMES


def test_boolean_options_default_to_false():
    for option in OPTIONS:
        if option.kind is OptionKind.BOOLEAN:
            assert option.default_value() is False
        else:
            assert option.default_value() == ""


def test_descriptor_is_immutable():
    option = get_option("adapter")
    with pytest.raises(Exception):
        option.name = "other"  # type: ignore[misc]


def test_duplicate_names_are_rejected():
    dup = (OptionDescriptor("a", "x"), OptionDescriptor("a", "y"))
    with pytest.raises(ValueError):
        option_index(dup)


def test_only_theme_accepts_a_mapping():
    assert [o.name for o in OPTIONS if o.allows_mapping] == ["theme"]
