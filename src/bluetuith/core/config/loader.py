# src/bluetuith/core/config/loader.py
"""
Loader em camadas da configuração do bluetuith.

Ordem de resolução:
    1. parse das flags (`argv`): erro de sintaxe é fatal
    2. leitura do arquivo `bluetuith.conf`: ausência tolerada,
       conteúdo malformado fatal
    3. overlay das flags explicitamente informadas sobre o arquivo

O arquivo vem primeiro e as flags por cima: os defaults persistentes do
usuário podem ser sobrescritos por invocação sem editar o arquivo.

Limites explícitos:
    - Não valida semântica de opções (responsabilidade dos validadores)
    - Não persiste configuração
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

from bluetuith.core.config.flags import build_flag_parser, split_args
from bluetuith.core.config.merge import overlay_flags
from bluetuith.core.config.parser import load_config_file
from bluetuith.core.config.paths import config_path as default_config_path
from bluetuith.core.config.schema import OPTIONS, OptionDescriptor
from bluetuith.core.config.store import PropertyStore


@dataclass
class LoadedConfig:
    """
    Resultado do loader: store pronto, caminho resolvido, chaves ignoradas
    do arquivo e argumentos posicionais (aceitos, sem uso na resolução).
    """

    store: PropertyStore
    config_path: Path
    unknown_keys: List[str] = field(default_factory=list)
    args: List[str] = field(default_factory=list)


def load_config(
    argv: Sequence[str],
    *,
    config_path: Optional[Path] = None,
    options: Tuple[OptionDescriptor, ...] = OPTIONS,
    help_footer: str = "",
) -> LoadedConfig:
    """
    Resolve o PropertyStore a partir de flags e arquivo de configuração.

    Args:
        argv: Argumentos do processo, sem o nome do programa.
        config_path: Caminho do arquivo; default é o caminho por usuário.
        options: Registro de opções.
        help_footer: Texto anexado ao final da ajuda (`--help`).

    Returns:
        LoadedConfig: store resolvido e metadados do carregamento.

    Raises:
        ConfigPathError: diretório de configuração indisponível.
        FlagSyntaxError: flag desconhecida ou malformada.
        ConfigFileSyntaxError: arquivo existente mas malformado.
        OptionFormatError: valor do arquivo com tipo incompatível.
    """
    path = Path(config_path) if config_path is not None else default_config_path()

    parser = build_flag_parser(path, options, help_footer=help_footer)
    flag_values, args = split_args(parser, argv)

    file_values = load_config_file(path)

    resolved, unknown = overlay_flags(file_values, flag_values, options)

    return LoadedConfig(
        store=PropertyStore.from_mapping(resolved),
        config_path=path,
        unknown_keys=unknown,
        args=args,
    )
