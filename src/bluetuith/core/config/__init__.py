# src/bluetuith/core/config/__init__.py
"""
Camada de configuração do bluetuith.

Responsabilidades do pacote:
    - Registro estático de opções (schema)
    - Conjunto de flags e texto de ajuda (flags)
    - Leitura do arquivo de configuração (parser, paths)
    - Overlay de flags sobre o arquivo (merge)
    - Store de propriedades com acessores tipados (store)

Limites explícitos:
    - Não valida semântica de opções
    - Não consulta adapters, devices ou o motor de tema
"""

from .loader import LoadedConfig, load_config
from .schema import OPTIONS, OptionDescriptor, OptionKind
from .store import AdapterStates, PropertyKind, PropertyStore, PropertyValue

__all__ = [
    "AdapterStates",
    "LoadedConfig",
    "OPTIONS",
    "OptionDescriptor",
    "OptionKind",
    "PropertyKind",
    "PropertyStore",
    "PropertyValue",
    "load_config",
]
