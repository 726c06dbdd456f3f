# src/bluetuith/core/config/merge.py
"""
Política de sobreposição (overlay) de flags sobre o arquivo de configuração.

Política:
    - flag explicitamente informada → sobrescreve o valor do arquivo
    - flag não informada            → nunca sobrescreve o valor do arquivo
    - chave ausente em ambos        → recebe o default do registro
    - chaves do arquivo desconhecidas pelo registro → ignoradas e reportadas

Coerção de valores vindos do arquivo (o parser entrega escalares como texto):
    - opção BOOLEAN → `true/false`, `yes/no`, `on/off` (sem distinção de caixa)
    - opção STRING  → texto, preservado literalmente (`0123` continua "0123")
    - mapa          → aceito apenas por opções com `allows_mapping` (`theme`)
    - lista, ou mapa em qualquer outra opção → `OptionFormatError`

Invariantes:
    - Nenhum input é mutado
    - A mesma entrada sempre produz a mesma saída
"""

from __future__ import annotations

from copy import deepcopy
from typing import Any, Dict, List, Mapping, Tuple

from bluetuith.core.config.schema import OPTIONS, OptionDescriptor
from bluetuith.core.errors import OptionFormatError

_TRUE_WORDS = frozenset({"true", "yes", "on"})
_FALSE_WORDS = frozenset({"false", "no", "off"})


def _coerce_boolean(option: OptionDescriptor, value: Any) -> bool:
    if isinstance(value, bool):
        return value

    if isinstance(value, str):
        word = value.strip().lower()
        if word in _TRUE_WORDS:
            return True
        if word in _FALSE_WORDS:
            return False

    raise OptionFormatError(
        f"Option '{option.name}' must be a boolean (true/false), got '{value}'.",
        details={"option": option.name, "value": repr(value)},
    )


def _coerce_file_value(option: OptionDescriptor, value: Any) -> Any:
    if option.is_boolean:
        return _coerce_boolean(option, value)

    if value is None:
        return option.default

    if isinstance(value, str):
        return value

    if isinstance(value, dict) and option.allows_mapping:
        return deepcopy(value)

    raise OptionFormatError(
        f"Option '{option.name}' has an invalid value type: {type(value).__name__}.",
        details={"option": option.name, "value_type": type(value).__name__},
    )


def overlay_flags(
    file_values: Mapping[str, Any],
    flag_values: Mapping[str, Any],
    options: Tuple[OptionDescriptor, ...] = OPTIONS,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Combina valores do arquivo e das flags numa única tabela resolvida.

    Args:
        file_values: Conteúdo do arquivo de configuração.
        flag_values: Somente as flags explicitamente informadas.
        options: Registro de opções.

    Returns:
        Tuple[Dict[str, Any], List[str]]: tabela resolvida e a lista de
        chaves do arquivo desconhecidas pelo registro.

    Raises:
        OptionFormatError: valor do arquivo com tipo incompatível com a opção.
    """
    known = {option.name: option for option in options}
    resolved: Dict[str, Any] = {}
    unknown: List[str] = []

    for key, value in file_values.items():
        option = known.get(key)
        if option is None:
            unknown.append(key)
            continue

        resolved[key] = _coerce_file_value(option, value)

    for key, value in flag_values.items():
        resolved[key] = value

    for option in options:
        if option.name not in resolved:
            resolved[option.name] = option.default_value()

    return resolved, unknown
