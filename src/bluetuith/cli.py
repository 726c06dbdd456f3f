# src/bluetuith/cli.py
"""
Ponto de entrada de linha de comando.

`resolve()` executa a inicialização completa (loader + validadores) e
retorna um `StartupResult`; `main()` traduz o resultado para o processo:

    - saídas informativas → stdout
    - falha               → "Error: <mensagem>" em stderr, exit 1
    - warnings            → stderr, exceto com `no-warning`
    - sucesso             → store congelado entregue a `app`, se houver

`--help` é tratado pelo argparse: imprime a ajuda e encerra com exit 0.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Callable, Optional, Sequence

from bluetuith import VERSION
from bluetuith.bluez import Bluetooth, SysfsBluetooth
from bluetuith.core.config.loader import load_config
from bluetuith.core.errors import ConfigError
from bluetuith.core.startup.context import StartupContext
from bluetuith.core.startup.orchestrator import EXIT_FAILURE, EXIT_OK, StartupResult, run_startup
from bluetuith.options import default_validators
from bluetuith.theme import Theme, ThemeEngine


def resolve(
    argv: Sequence[str],
    *,
    config_path: Optional[Path] = None,
    bluetooth: Optional[Bluetooth] = None,
    theme: Optional[ThemeEngine] = None,
    version: str = VERSION,
) -> StartupResult:
    bluetooth = bluetooth if bluetooth is not None else SysfsBluetooth()
    theme = theme if theme is not None else Theme()

    try:
        loaded = load_config(argv, config_path=config_path, help_footer=theme.element_data())
    except ConfigError as exc:
        return StartupResult(results={}, exit_code=EXIT_FAILURE, error=exc.to_payload())

    ctx = StartupContext(
        store=loaded.store,
        config_path=loaded.config_path,
        bluetooth=bluetooth,
        theme=theme,
        version=version,
    )
    ctx.log(option="config", level="INFO", message=f"loaded {loaded.config_path}")

    for key in loaded.unknown_keys:
        ctx.add_warning(option="config", message=f"Unknown option '{key}' in {loaded.config_path} was ignored.")

    return run_startup(ctx, default_validators())


def main(
    argv: Optional[Sequence[str]] = None,
    *,
    config_path: Optional[Path] = None,
    bluetooth: Optional[Bluetooth] = None,
    theme: Optional[ThemeEngine] = None,
    version: str = VERSION,
    app: Optional[Callable[[StartupResult], int]] = None,
) -> int:
    result = resolve(
        sys.argv[1:] if argv is None else argv,
        config_path=config_path,
        bluetooth=bluetooth,
        theme=theme,
        version=version,
    )

    for text in result.output:
        print(text)

    if result.error is not None:
        print(f"Error: {result.error.message}", file=sys.stderr)
        return result.exit_code

    if result.store is None:
        return result.exit_code

    if not result.store.is_property_enabled("no-warning"):
        for warning in result.warnings:
            print(f"Warning: {warning}", file=sys.stderr)

    if app is not None:
        return app(result)

    return EXIT_OK
