# src/bluetuith/core/config/flags.py
"""
Conjunto de flags de linha de comando derivado do registro de opções.

Cada `OptionDescriptor` é registrado como uma flag `--<name>`:
    - opções BOOLEAN → `store_true`
    - opções STRING  → um argumento textual

Flags não informadas ficam ausentes do resultado (`argparse.SUPPRESS`),
o que permite ao loader distinguir "não informada" de "informada vazia".
Qualquer erro de parse vira `FlagSyntaxError` com a mensagem do argparse.
Argumentos posicionais são aceitos e devolvidos à parte; apenas flags
desconhecidas são rejeitadas.
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Tuple

from bluetuith.core.config.schema import OPTIONS, OptionDescriptor
from bluetuith.core.errors import FlagSyntaxError

PROG = "bluetuith"


class FlagParser(argparse.ArgumentParser):
    """ArgumentParser que levanta `FlagSyntaxError` em vez de encerrar o processo."""

    def __init__(
        self,
        *args: Any,
        usage_renderer: Optional[Callable[[], str]] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(*args, **kwargs)
        self._usage_renderer = usage_renderer

    def error(self, message: str) -> None:  # type: ignore[override]
        raise FlagSyntaxError(message)

    def format_help(self) -> str:
        if self._usage_renderer is not None:
            return self._usage_renderer()
        return super().format_help()


def render_usage(
    config_file: Path,
    options: Tuple[OptionDescriptor, ...] = OPTIONS,
    *,
    footer: str = "",
) -> str:
    """Texto de ajuda: programa, arquivo de configuração e uma entrada por flag."""
    usage = f"{PROG} [<flags>]\n\nConfig file is {config_file}\n\nFlags:\n"

    for option in options:
        line = f"  --{option.name}"
        if option.metavar:
            line += f" {option.metavar}"

        line += "\n    \t"
        line += option.description.replace("\n", "\n    \t")
        usage += line + "\n"

    if footer:
        usage += "\n" + footer

    return usage


def build_flag_parser(
    config_file: Path,
    options: Tuple[OptionDescriptor, ...] = OPTIONS,
    *,
    help_footer: str = "",
) -> FlagParser:
    parser = FlagParser(
        prog=PROG,
        allow_abbrev=False,
        argument_default=argparse.SUPPRESS,
        usage_renderer=lambda: render_usage(config_file, options, footer=help_footer),
    )

    for option in options:
        if option.is_boolean:
            parser.add_argument(
                f"--{option.name}",
                dest=option.name,
                action="store_true",
                help=option.description,
            )
            continue

        parser.add_argument(
            f"--{option.name}",
            dest=option.name,
            metavar=option.metavar,
            help=option.description,
        )

    return parser


def split_args(parser: FlagParser, argv: Sequence[str]) -> Tuple[Dict[str, Any], List[str]]:
    """
    Separa `argv` em flags explicitamente informadas e argumentos posicionais.

    Raises:
        FlagSyntaxError: flag desconhecida ou valor ausente.
    """
    namespace, extras = parser.parse_known_args(list(argv))

    unknown = [arg for arg in extras if arg.startswith("-") and arg not in ("-", "--")]
    if unknown:
        parser.error(f"unrecognized arguments: {' '.join(unknown)}")

    return dict(vars(namespace)), [arg for arg in extras if arg != "--"]


def parse_flags(parser: FlagParser, argv: Sequence[str]) -> Dict[str, Any]:
    """Retorna apenas as flags explicitamente informadas em `argv`."""
    flags, _ = split_args(parser, argv)
    return flags
