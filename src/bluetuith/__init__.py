# src/bluetuith/__init__.py
"""
bluetuith — resolução da configuração de inicialização.

Este pacote resolve, uma única vez e de forma síncrona, a configuração
efetiva do processo a partir de flags de linha de comando e do arquivo
`bluetuith.conf`, valida cada opção e entrega ao restante da aplicação
um conjunto de propriedades confiável e somente leitura.

Subpacotes:
    - core.config  → schema de opções, flags, loader e property store
    - core.startup → contexto, registro e orquestração dos validadores
    - options      → um validador por opção semanticamente relevante
    - bluez        → interface de enumeração de adapters/devices
    - theme        → tabela de elementos de tema e aplicação de cores
"""

__version__ = "0.2.3"

# Formato "<versão>@<build>"; o segmento de build é opcional.
VERSION = f"{__version__}@unknown"

__all__ = ["__version__", "VERSION"]
