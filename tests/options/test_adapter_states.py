# tests/options/test_adapter_states.py
"""
Testes do validador de `adapter-states`.

Cobrem:
- sinônimos de estado e separadores aceitos
- sequência preservada com repetições (última escrita vence no mapa)
- propriedade e estado inválidos, com as mensagens exibidas ao usuário
- atomicidade: token inválido não altera o store
"""

import pytest

from bluetuith.core.config.store import AdapterStates, PropertyKind
from bluetuith.core.errors import InvalidPropertyError, InvalidStateError, OptionFormatError
from bluetuith.core.startup.types import ValidationStatus
from bluetuith.options.adapter_states import (
    AdapterStatesOption,
    normalize_state,
    parse_adapter_states,
    split_token,
)


def test_synonyms_and_order():
    parsed = parse_adapter_states("scan:on,powered:off")

    assert dict(parsed.states) == {"scan": "yes", "powered": "no"}
    assert parsed.sequence == ("scan", "powered")


@pytest.mark.parametrize(
    "state, expected",
    [("yes", "yes"), ("y", "yes"), ("on", "yes"), ("no", "no"), ("n", "no"), ("off", "no")],
)
def test_state_synonyms(state, expected):
    assert normalize_state("powered", state) == expected


def test_space_separator_and_padding():
    parsed = parse_adapter_states("powered yes, discoverable:n")

    assert dict(parsed.states) == {"powered": "yes", "discoverable": "no"}
    assert parsed.sequence == ("powered", "discoverable")


def test_repeated_property_keeps_sequence_and_last_state():
    parsed = parse_adapter_states("powered:yes,scan:yes,powered:no")

    assert parsed.states["powered"] == "no"
    assert parsed.sequence == ("powered", "scan", "powered")
    assert parsed.as_property_map()["sequence"] == "powered,scan,powered"


def test_parsed_states_are_read_only():
    parsed = parse_adapter_states("powered:yes")

    with pytest.raises(TypeError):
        parsed.states["powered"] = "no"  # type: ignore[index]


def test_property_names_are_case_sensitive():
    with pytest.raises(InvalidPropertyError) as excinfo:
        parse_adapter_states("Pairable:yes")

    assert str(excinfo.value) == (
        "Provided property 'Pairable' is incorrect.\n"
        "Valid properties are 'powered, scan, discoverable, pairable'."
    )


def test_invalid_state_message():
    with pytest.raises(InvalidStateError) as excinfo:
        parse_adapter_states("powered:maybe")

    assert str(excinfo.value) == (
        "Provided state 'maybe' for property 'powered' is incorrect.\n"
        "Valid states are 'yes, no, y, n, on, off'."
    )


@pytest.mark.parametrize("token", ["powered", "powered:yes:no", "", "powered:"])
def test_token_needs_exactly_two_fields(token):
    with pytest.raises(OptionFormatError) as excinfo:
        split_token(token)

    assert str(excinfo.value) == f"Provided property:state format '{token}' is incorrect."


def test_trailing_comma_is_rejected():
    with pytest.raises(OptionFormatError):
        parse_adapter_states("powered:yes,")


def test_validator_stores_structured_value(make_ctx):
    ctx = make_ctx({"adapter-states": "scan:on,powered:off"})

    result = AdapterStatesOption().run(ctx)

    assert result.status is ValidationStatus.NORMALIZED
    assert ctx.store.kind_of("adapter-states") is PropertyKind.ADAPTER_STATES
    assert ctx.store.get_adapter_states() == AdapterStates(
        states={"scan": "yes", "powered": "no"},
        sequence=("scan", "powered"),
    )
    assert result.payload["sequence"] == ["scan", "powered"]


def test_validator_is_noop_when_unset(make_ctx):
    ctx = make_ctx()

    result = AdapterStatesOption().run(ctx)

    assert result.status is ValidationStatus.UNCHANGED
    assert ctx.store.get_property("adapter-states") == ""


def test_invalid_token_leaves_store_untouched(make_ctx):
    ctx = make_ctx({"adapter-states": "powered:yes,scan:perhaps"})

    with pytest.raises(InvalidStateError):
        AdapterStatesOption().run(ctx)

    assert ctx.store.kind_of("adapter-states") is PropertyKind.STRING
    assert ctx.store.get_property("adapter-states") == "powered:yes,scan:perhaps"


def test_mixed_separators_fail_at_first_bad_property():
    with pytest.raises(InvalidPropertyError) as excinfo:
        parse_adapter_states("powered: yes, scan:off, Pairable:Yes")

    assert "'Pairable'" in str(excinfo.value)
