# src/bluetuith/core/config/paths.py
"""
Resolução do caminho do arquivo de configuração por usuário.

O diretório é o diretório de configuração do usuário para "bluetuith"
(via `appdirs`, ex.: `~/.config/bluetuith` no Linux). Um diretório legado
`~/.bluetuith` já existente tem precedência. Se nenhum existir, o
diretório padrão é criado com permissão 0700.

A existência do arquivo em si não é verificada aqui: o loader tolera
arquivo ausente.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from appdirs import user_config_dir

from bluetuith.core.errors import ConfigPathError

APP_NAME = "bluetuith"
CONFIG_FILE_NAME = "bluetuith.conf"


def config_dir(home: Optional[Path] = None) -> Path:
    home = home if home is not None else Path.home()

    legacy = home / f".{APP_NAME}"
    if legacy.is_dir():
        return legacy

    return Path(user_config_dir(APP_NAME))


def config_path(file_name: str = CONFIG_FILE_NAME, *, home: Optional[Path] = None) -> Path:
    """
    Resolve (e cria, se necessário) o diretório e retorna o caminho do arquivo.

    Raises:
        ConfigPathError: se o diretório não puder ser determinado ou criado.
    """
    try:
        directory = config_dir(home)
        directory.mkdir(mode=0o700, parents=True, exist_ok=True)
    except (OSError, RuntimeError) as exc:
        raise ConfigPathError(
            "Cannot get config directory",
            details={"reason": str(exc)},
        ) from exc

    return directory / file_name
