# src/bluetuith/options/__init__.py
"""
Validadores de opção do bluetuith, um por opção semanticamente relevante.

`default_validators()` monta o registro na ordem fixa de execução:

    version → list-adapters → adapter → adapter-states → connect-bdaddr
    → receive-dir → gsm → theme → generate

`connect-bdaddr` depende do adapter corrente resolvido por `adapter`;
`generate` roda por último para persistir valores já validados.
"""

from ..core.startup.registry import ValidatorRegistry
from .actions import GenerateOption, VersionOption
from .adapter import AdapterOption, ConnectBDAddrOption, ListAdaptersOption
from .adapter_states import AdapterStatesOption
from .gsm import GsmOption
from .receive_dir import ReceiveDirOption
from .theme import ThemeOption


def default_validators() -> ValidatorRegistry:
    registry = ValidatorRegistry()
    for validator in (
        VersionOption(),
        ListAdaptersOption(),
        AdapterOption(),
        AdapterStatesOption(),
        ConnectBDAddrOption(),
        ReceiveDirOption(),
        GsmOption(),
        ThemeOption(),
        GenerateOption(),
    ):
        registry.add(validator)
    return registry


__all__ = [
    "AdapterOption",
    "AdapterStatesOption",
    "ConnectBDAddrOption",
    "GenerateOption",
    "GsmOption",
    "ListAdaptersOption",
    "ReceiveDirOption",
    "ThemeOption",
    "VersionOption",
    "default_validators",
]
