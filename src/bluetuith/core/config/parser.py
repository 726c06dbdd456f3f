# src/bluetuith/core/config/parser.py
"""
Parser de texto estruturado do bluetuith.

Um único parser é usado tanto para o arquivo `bluetuith.conf` quanto
para temas informados inline via `--theme`. O formato é YAML (superset
de JSON), lido com `yaml.BaseLoader`.

Decisões:
    - Todo escalar é lido como texto: `12:34:56:12:34:56` e `0123` não
      viram números (sexagesimal/octal do YAML 1.1); a conversão de
      booleanos fica a cargo do overlay, por opção
    - Texto vazio (ou só comentários) equivale a um mapa vazio
    - Erros de sintaxe do YAML são propagados como `yaml.YAMLError`;
      cada chamador decide qual `ConfigError` levantar
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import yaml  # PyYAML

from bluetuith.core.errors import ConfigFileSyntaxError, InvalidConfigRootTypeError


def parse_structured_text(text: str) -> Any:
    data = yaml.load(text, Loader=yaml.BaseLoader)
    if data is None:
        return {}
    return data


def load_config_file(path: Path) -> Dict[str, Any]:
    """
    Carrega o arquivo de configuração como dicionário.

    Política:
        - arquivo ausente → `{}` (não é erro)
        - arquivo vazio   → `{}`
        - YAML malformado → `ConfigFileSyntaxError`
        - raiz não-dict   → `InvalidConfigRootTypeError`

    Args:
        path (Path): Caminho do arquivo de configuração.

    Returns:
        Dict[str, Any]: Conteúdo do arquivo.
    """
    if not path.exists():
        return {}

    try:
        with path.open("r", encoding="utf-8") as f:
            data = parse_structured_text(f.read())
    except yaml.YAMLError as exc:
        raise ConfigFileSyntaxError(
            f"{path}: {exc}",
            details={"path": str(path)},
        ) from exc
    except OSError as exc:
        raise ConfigFileSyntaxError(
            f"{path}: {exc.strerror or exc}",
            details={"path": str(path)},
        ) from exc

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"{path}: config root must be a mapping, got {type(data).__name__}",
            details={"path": str(path), "root_type": type(data).__name__},
        )

    return {str(k): v for k, v in data.items()}
