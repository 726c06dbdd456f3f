# src/bluetuith/options/actions.py
"""
Ações terminais: `version` e `generate`.

Ambas encerram a inicialização com exit code 0 quando habilitadas;
nenhum validador posterior é executado.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Tuple

import yaml  # PyYAML

from bluetuith.core.config.schema import OptionDescriptor
from bluetuith.core.config.store import PropertyStore, plain_copy
from bluetuith.core.errors import ConfigPathError
from bluetuith.core.startup.context import StartupContext
from bluetuith.core.startup.types import ValidationResult, ValidationStatus

# Opções que descrevem ações, não preferências persistentes.
ACTION_OPTIONS = frozenset({"generate", "version", "list-adapters"})

HEADER = "# bluetuith configuration file.\n# Flags given on the command line override the values below.\n\n"


def format_version(version: str) -> str:
    """`"1.2@abc"` → `"Bluetuith v1.2 (abc)"`; sem build → `"Bluetuith v1.2"`."""
    number, sep, build = version.partition("@")
    if not sep or not build:
        return f"Bluetuith v{number}"
    return f"Bluetuith v{number} ({build})"


def _persistable_value(store: PropertyStore, option: OptionDescriptor) -> Any:
    states = store.get_adapter_states(option.name)
    if states is not None:
        ordered = dict.fromkeys(states.sequence)
        return ",".join(f"{prop}:{states.states[prop]}" for prop in ordered)

    value = store.get(option.name)
    if value is None:
        return option.default_value()
    return plain_copy(value)


def render_config(store: PropertyStore, options: Tuple[OptionDescriptor, ...]) -> str:
    document: Dict[str, Any] = {}
    for option in options:
        if option.name in ACTION_OPTIONS:
            continue
        document[option.name] = _persistable_value(store, option)

    return HEADER + yaml.safe_dump(document, sort_keys=False, default_flow_style=False, allow_unicode=True)


def generate_config(store: PropertyStore, path: Path, options: Tuple[OptionDescriptor, ...]) -> Path:
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(render_config(store, options), encoding="utf-8")
    except OSError as exc:
        raise ConfigPathError(
            f"{path}: Cannot write configuration: {exc.strerror or exc}",
            details={"path": str(path)},
        ) from exc
    return path


class VersionOption:
    id = "version"

    def run(self, ctx: StartupContext) -> ValidationResult:
        if not ctx.store.is_property_enabled(self.id):
            return ValidationResult(self.id, ValidationStatus.UNCHANGED, "not set")

        text = format_version(ctx.version)
        return ValidationResult(self.id, ValidationStatus.TERMINATED, text, output=text)


class GenerateOption:
    id = "generate"

    def run(self, ctx: StartupContext) -> ValidationResult:
        if not ctx.store.is_property_enabled(self.id):
            return ValidationResult(self.id, ValidationStatus.UNCHANGED, "not set")

        path = generate_config(ctx.store, ctx.config_path, ctx.options)
        return ValidationResult(
            self.id,
            ValidationStatus.TERMINATED,
            f"generated {path}",
            output=f"Generated configuration at {path}",
        )
