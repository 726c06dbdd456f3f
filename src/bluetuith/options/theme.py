# src/bluetuith/options/theme.py
"""
Validador de `theme`.

O valor pode chegar de duas formas:
    - mapa, vindo de uma subseção `theme:` do arquivo de configuração
    - string, vinda de `--theme` ou de uma string no arquivo; neste caso é
      interpretada com o mesmo parser de texto estruturado do arquivo

O mapa resultante substitui a string no store, é achatado em chaves
pontuadas com valores textuais e, se não vazio, entregue ao motor de
tema, que valida elementos e cores e aplica o tema.

Reaplicar o validador sobre um mapa já estruturado não altera o resultado.
"""

from __future__ import annotations

from typing import Any, Dict, Mapping

import yaml  # PyYAML

from bluetuith.core.config.parser import parse_structured_text
from bluetuith.core.config.store import PropertyKind
from bluetuith.core.errors import ThemeFormatError
from bluetuith.core.startup.context import StartupContext
from bluetuith.core.startup.types import ValidationResult, ValidationStatus

OPTION = "theme"


def parse_theme_text(text: str) -> Dict[str, Any]:
    try:
        data = parse_structured_text(text)
    except yaml.YAMLError as exc:
        raise ThemeFormatError(
            "Provided theme format is invalid",
            details={"reason": str(exc)},
        ) from exc

    if not isinstance(data, dict):
        raise ThemeFormatError(
            "Provided theme format is invalid",
            details={"reason": f"expected a mapping, got {type(data).__name__}"},
        )

    return data


def flatten_theme(theme: Mapping[Any, Any], prefix: str = "") -> Dict[str, str]:
    flat: Dict[str, str] = {}
    for key, value in theme.items():
        name = f"{prefix}{key}"
        if isinstance(value, Mapping):
            flat.update(flatten_theme(value, prefix=f"{name}."))
        elif value is None:
            flat[name] = ""
        else:
            flat[name] = str(value)
    return flat


class ThemeOption:
    id = OPTION

    def run(self, ctx: StartupContext) -> ValidationResult:
        if not ctx.store.exists(OPTION):
            return ValidationResult(OPTION, ValidationStatus.UNCHANGED, "not set")

        if ctx.store.kind_of(OPTION) is PropertyKind.STRING:
            ctx.store.add_property(OPTION, parse_theme_text(ctx.store.get_property(OPTION)))

        theme_map = flatten_theme(ctx.store.get_mapping(OPTION))
        if not theme_map:
            return ValidationResult(OPTION, ValidationStatus.UNCHANGED, "empty theme")

        ctx.theme.parse_theme_config(theme_map)

        return ValidationResult(
            OPTION,
            ValidationStatus.NORMALIZED,
            f"{len(theme_map)} theme element(s)",
            payload={"elements": sorted(theme_map)},
        )
