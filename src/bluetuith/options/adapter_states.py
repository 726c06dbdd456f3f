# src/bluetuith/options/adapter_states.py
"""
Validador de `adapter-states`.

Entrada: sequência separada por vírgulas de tokens `propriedade:estado`
ou `propriedade estado` (ex.: "powered:yes, scan off").

Etapas por token:
    1. divisão em exatamente dois campos (separadores: espaço e ':')
    2. propriedade ∈ {powered, scan, discoverable, pairable} (case-sensitive)
    3. estado normalizado: {yes, y, on} → yes; {no, n, off} → no

O resultado acumula o mapa propriedade → estado e, separadamente, a
sequência de propriedades na ordem de entrada (com repetições), para que
consumidores possam reaplicar as operações na ordem pretendida.

A opção é atômica: o primeiro token inválido rejeita a opção inteira e
nada é gravado no store.
"""

from __future__ import annotations

import re
from typing import Dict, List, Tuple

from bluetuith.core.config.store import AdapterStates
from bluetuith.core.errors import InvalidPropertyError, InvalidStateError, OptionFormatError
from bluetuith.core.startup.context import StartupContext
from bluetuith.core.startup.types import ValidationResult, ValidationStatus

OPTION = "adapter-states"

PROPERTY_OPTIONS: Tuple[str, ...] = ("powered", "scan", "discoverable", "pairable")
STATE_OPTIONS: Tuple[str, ...] = ("yes", "no", "y", "n", "on", "off")

_STATE_SYNONYMS: Dict[str, str] = {
    "yes": "yes",
    "y": "yes",
    "on": "yes",
    "no": "no",
    "n": "no",
    "off": "no",
}

_FIELD_SEP = re.compile(r"[ :]")


def split_token(token: str) -> Tuple[str, str]:
    fields = [f for f in _FIELD_SEP.split(token) if f]
    if len(fields) != 2:
        raise OptionFormatError(
            f"Provided property:state format '{token}' is incorrect.",
            details={"token": token, "fields": len(fields)},
        )
    return fields[0], fields[1]


def check_property(prop: str) -> str:
    if prop not in PROPERTY_OPTIONS:
        raise InvalidPropertyError(
            f"Provided property '{prop}' is incorrect.\n"
            f"Valid properties are '{', '.join(PROPERTY_OPTIONS)}'.",
            details={"property": prop},
        )
    return prop


def normalize_state(prop: str, state: str) -> str:
    canonical = _STATE_SYNONYMS.get(state)
    if canonical is None:
        raise InvalidStateError(
            f"Provided state '{state}' for property '{prop}' is incorrect.\n"
            f"Valid states are '{', '.join(STATE_OPTIONS)}'.",
            details={"property": prop, "state": state},
        )
    return canonical


def parse_adapter_states(text: str) -> AdapterStates:
    """
    Converte o texto da opção em `AdapterStates`.

    Raises:
        OptionFormatError: token sem exatamente dois campos.
        InvalidPropertyError: propriedade desconhecida.
        InvalidStateError: estado fora dos sinônimos aceitos.
    """
    states: Dict[str, str] = {}
    sequence: List[str] = []

    for token in text.split(","):
        prop, state = split_token(token)
        check_property(prop)
        states[prop] = normalize_state(prop, state)
        sequence.append(prop)

    return AdapterStates(states=states, sequence=tuple(sequence))


class AdapterStatesOption:
    id = OPTION

    def run(self, ctx: StartupContext) -> ValidationResult:
        raw = ctx.store.get_property(OPTION)
        if raw == "":
            return ValidationResult(OPTION, ValidationStatus.UNCHANGED, "not set")

        parsed = parse_adapter_states(raw)
        ctx.store.add_property(OPTION, parsed)

        return ValidationResult(
            OPTION,
            ValidationStatus.NORMALIZED,
            f"{len(parsed.sequence)} adapter state(s)",
            payload={"sequence": list(parsed.sequence)},
        )
