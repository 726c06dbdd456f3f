# src/bluetuith/core/config/schema.py
"""
Registro canônico de opções do bluetuith.

Este módulo define a tabela estática de opções reconhecidas. É a única
fonte de verdade para nomes de opção: o conjunto de flags, o texto de
ajuda, os defaults do loader e o `--generate` iteram esta mesma sequência.

Invariantes:
    - Nomes de opção são únicos
    - A ordem da tabela afeta apenas a renderização da ajuda
    - Opções booleanas têm default `False`; opções string têm default textual

Limites explícitos:
    - Não valida valores
    - Não realiza I/O
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Optional, Tuple


class OptionKind(str, Enum):
    BOOLEAN = "boolean"
    STRING = "string"


@dataclass(frozen=True)
class OptionDescriptor:
    """
    Descritor imutável de uma opção de linha de comando/arquivo.

    Campos:
    - name: nome da opção (também a chave no arquivo de configuração)
    - description: texto exibido na ajuda
    - kind: BOOLEAN ou STRING
    - default: valor textual default de opções STRING
    - metavar: rótulo do argumento na ajuda (ex.: "<adapter>")
    - allows_mapping: aceita um mapa aninhado no arquivo (apenas `theme`)
    """

    name: str
    description: str
    kind: OptionKind = OptionKind.STRING
    default: str = ""
    metavar: Optional[str] = None
    allows_mapping: bool = False

    @property
    def is_boolean(self) -> bool:
        return self.kind is OptionKind.BOOLEAN

    def default_value(self) -> Any:
        return False if self.is_boolean else self.default


OPTIONS: Tuple[OptionDescriptor, ...] = (
    OptionDescriptor(
        name="list-adapters",
        description="List available adapters.",
        kind=OptionKind.BOOLEAN,
    ),
    OptionDescriptor(
        name="adapter",
        description="Specify an adapter to use. (For example, hci0)",
        metavar="<adapter>",
    ),
    OptionDescriptor(
        name="receive-dir",
        description="Specify a directory to store received files.",
        metavar="<dir>",
    ),
    OptionDescriptor(
        name="gsm-apn",
        description="Specify GSM APN to connect to. (Required for DUN)",
        metavar="<apn>",
    ),
    OptionDescriptor(
        name="gsm-number",
        description="Specify GSM number to dial. (Required for DUN)",
        metavar="<number>",
    ),
    OptionDescriptor(
        name="adapter-states",
        description=(
            "Specify adapter states to enable/disable. "
            "(For example, 'powered:yes,discoverable:yes,pairable:yes,scan:no')"
        ),
        metavar="[<property>:<state>]",
    ),
    OptionDescriptor(
        name="connect-bdaddr",
        description="Specify device address to connect (For example, 'AA:BB:CC:DD:EE:FF')",
        metavar="<address>",
    ),
    OptionDescriptor(
        name="theme",
        description="Specify a theme in the YAML/JSON format. (For example, '{ Adapter: \"red\" }')",
        metavar="<theme>",
        allows_mapping=True,
    ),
    OptionDescriptor(
        name="no-warning",
        description="Do not display warnings when the application has initialized.",
        kind=OptionKind.BOOLEAN,
    ),
    OptionDescriptor(
        name="no-help-display",
        description="Do not display help keybindings in the application.",
        kind=OptionKind.BOOLEAN,
    ),
    OptionDescriptor(
        name="confirm-on-quit",
        description="Ask for confirmation before quitting the application.",
        kind=OptionKind.BOOLEAN,
    ),
    OptionDescriptor(
        name="generate",
        description="Generate configuration.",
        kind=OptionKind.BOOLEAN,
    ),
    OptionDescriptor(
        name="version",
        description="Print version information.",
        kind=OptionKind.BOOLEAN,
    ),
)


def option_index(options: Tuple[OptionDescriptor, ...] = OPTIONS) -> Dict[str, OptionDescriptor]:
    """Retorna `name -> descriptor`, preservando a ordem do registro."""
    index: Dict[str, OptionDescriptor] = {}
    for option in options:
        if option.name in index:
            raise ValueError(f"Duplicate option name: {option.name}")
        index[option.name] = option
    return index


def get_option(name: str, options: Tuple[OptionDescriptor, ...] = OPTIONS) -> OptionDescriptor:
    return option_index(options)[name]
