# tests/core/config/test_merge.py
"""
Testes da política de overlay de flags sobre o arquivo.

Política validada:
    - flag informada sobrescreve o arquivo
    - flag ausente nunca sobrescreve
    - defaults do registro preenchem o restante
    - inputs não são mutados
"""

import pytest

from bluetuith.core.config.merge import overlay_flags
from bluetuith.core.config.schema import OPTIONS
from bluetuith.core.errors import OptionFormatError


def test_flag_beats_file():
    resolved, _ = overlay_flags({"adapter": "hci0"}, {"adapter": "hci1"})
    assert resolved["adapter"] == "hci1"


def test_file_only_value_is_preserved():
    resolved, _ = overlay_flags({"gsm-apn": "internet"}, {"adapter": "hci1"})
    assert resolved["gsm-apn"] == "internet"


def test_defaults_fill_every_option():
    resolved, unknown = overlay_flags({}, {})
    assert set(resolved) == {o.name for o in OPTIONS}
    assert resolved["generate"] is False
    assert resolved["theme"] == ""
    assert unknown == []


def test_text_values_are_kept_verbatim():
    resolved, _ = overlay_flags({"gsm-number": "0123", "connect-bdaddr": "12:34:56:12:34:56"}, {})
    assert resolved["gsm-number"] == "0123"
    assert resolved["connect-bdaddr"] == "12:34:56:12:34:56"


@pytest.mark.parametrize(
    "word, expected",
    [("true", True), ("True", True), ("yes", True), ("on", True), ("false", False), ("NO", False), ("off", False)],
)
def test_boolean_words_for_boolean_options(word, expected):
    resolved, _ = overlay_flags({"confirm-on-quit": word}, {})
    assert resolved["confirm-on-quit"] is expected


def test_boolean_words_on_string_options_stay_text():
    resolved, _ = overlay_flags({"adapter-states": "on"}, {})
    assert resolved["adapter-states"] == "on"


def test_null_value_falls_back_to_default():
    resolved, _ = overlay_flags({"receive-dir": None}, {})
    assert resolved["receive-dir"] == ""


def test_mapping_value_is_copied():
    theme = {"Adapter": "red"}
    resolved, _ = overlay_flags({"theme": theme}, {})

    resolved["theme"]["Adapter"] = "blue"
    assert theme == {"Adapter": "red"}


@pytest.mark.parametrize("value", ["sometimes", "", "1", 1, None])
def test_boolean_option_requires_boolean(value):
    with pytest.raises(OptionFormatError):
        overlay_flags({"confirm-on-quit": value}, {})


def test_list_value_for_string_option_is_rejected():
    with pytest.raises(OptionFormatError):
        overlay_flags({"adapter": ["hci0"]}, {})


@pytest.mark.parametrize("name", ["adapter", "receive-dir", "gsm-number", "connect-bdaddr"])
def test_mapping_value_is_only_accepted_for_theme(name):
    with pytest.raises(OptionFormatError):
        overlay_flags({name: {"name": "hci9"}}, {})


def test_non_text_scalar_for_string_option_is_rejected():
    with pytest.raises(OptionFormatError):
        overlay_flags({"gsm-number": 5551234}, {})


def test_unknown_keys_are_reported_and_dropped():
    resolved, unknown = overlay_flags({"colour": "blue", "extra": [1, 2]}, {})
    assert unknown == ["colour", "extra"]
    assert "colour" not in resolved


def test_inputs_are_not_mutated():
    file_values = {"adapter": "hci0"}
    flag_values = {"no-warning": True}
    overlay_flags(file_values, flag_values)

    assert file_values == {"adapter": "hci0"}
    assert flag_values == {"no-warning": True}
