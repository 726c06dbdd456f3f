# src/bluetuith/core/config/store.py
"""
PropertyStore — tabela de propriedades resolvidas do processo.

O store é criado uma única vez pelo loader, mutado em sequência pelos
validadores de opção e congelado pelo orquestrador quando todos os
validadores concluem. Depois disso é somente leitura.

Cada valor é uma variante marcada (`PropertyValue`) com um `PropertyKind`
explícito, e cada tipo esperado tem seu próprio acessor. Assim, ler uma
opção string que contém um mapa retorna "" em vez de falhar em runtime.

Invariantes:
    - Chaves são únicas; escritas posteriores sobrescrevem as anteriores
    - Após `freeze()`, qualquer escrita levanta `FrozenStoreError`, e mapas
      (inclusive aninhados) passam a ser expostos somente como leitura
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

from bluetuith.core.errors import FrozenStoreError


def readonly_copy(value: Any) -> Any:
    """Cópia profunda de mapas como `MappingProxyType`; demais valores inalterados."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: readonly_copy(v) for k, v in value.items()})
    return value


def plain_copy(value: Any) -> Any:
    """Inverso de `readonly_copy`: mapas (inclusive aninhados) viram `dict`."""
    if isinstance(value, Mapping):
        return {k: plain_copy(v) for k, v in value.items()}
    return value


class PropertyKind(str, Enum):
    STRING = "string"
    BOOLEAN = "boolean"
    MAPPING = "mapping"
    ADAPTER_STATES = "adapter_states"


@dataclass(frozen=True)
class AdapterStates:
    """
    Estados de adapter resolvidos a partir de `adapter-states`.

    - states: propriedade → "yes" | "no" (última escrita vence)
    - sequence: nomes de propriedade na ordem de entrada, com repetições
    """

    states: Mapping[str, str]
    sequence: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "states", MappingProxyType(dict(self.states)))
        object.__setattr__(self, "sequence", tuple(self.sequence))

    def as_property_map(self) -> Dict[str, str]:
        """Forma plana: os estados mais a chave `sequence` separada por vírgulas."""
        flat = dict(self.states)
        flat["sequence"] = ",".join(self.sequence)
        return flat


@dataclass(frozen=True)
class PropertyValue:
    kind: PropertyKind
    value: Any

    @classmethod
    def of(cls, value: Any) -> "PropertyValue":
        if isinstance(value, AdapterStates):
            return cls(PropertyKind.ADAPTER_STATES, value)
        # bool antes de str: a ordem importa para subclasses
        if isinstance(value, bool):
            return cls(PropertyKind.BOOLEAN, value)
        if isinstance(value, str):
            return cls(PropertyKind.STRING, value)
        if isinstance(value, Mapping):
            return cls(PropertyKind.MAPPING, dict(value))
        raise TypeError(f"Unsupported property value type: {type(value).__name__}")


@dataclass
class PropertyStore:
    """Store de propriedades com acessores tipados."""

    _values: Dict[str, PropertyValue] = field(default_factory=dict, repr=False)
    _frozen: bool = field(default=False, init=False)

    @classmethod
    def from_mapping(cls, values: Mapping[str, Any]) -> "PropertyStore":
        store = cls()
        for name, value in values.items():
            store.add_property(name, value)
        return store

    # -----------------------------
    # Escrita
    # -----------------------------
    def add_property(self, name: str, value: Any) -> None:
        if self._frozen:
            raise FrozenStoreError(
                f"Cannot set property '{name}': configuration is read-only after startup.",
                details={"property": name},
            )
        self._values[name] = PropertyValue.of(value)

    def freeze(self) -> None:
        for name, entry in list(self._values.items()):
            if entry.kind is PropertyKind.MAPPING:
                self._values[name] = PropertyValue(entry.kind, readonly_copy(entry.value))
        self._frozen = True

    @property
    def frozen(self) -> bool:
        return self._frozen

    # -----------------------------
    # Leitura
    # -----------------------------
    def exists(self, name: str) -> bool:
        return name in self._values

    def kind_of(self, name: str) -> Optional[PropertyKind]:
        entry = self._values.get(name)
        return entry.kind if entry is not None else None

    def get(self, name: str) -> Any:
        """Valor bruto da variante, ou None se ausente."""
        entry = self._values.get(name)
        return entry.value if entry is not None else None

    def get_property(self, name: str) -> str:
        entry = self._values.get(name)
        if entry is None or entry.kind is not PropertyKind.STRING:
            return ""
        return entry.value

    def is_property_enabled(self, name: str) -> bool:
        entry = self._values.get(name)
        return entry is not None and entry.kind is PropertyKind.BOOLEAN and entry.value is True

    def get_mapping(self, name: str) -> Mapping[str, Any]:
        entry = self._values.get(name)
        if entry is None or entry.kind is not PropertyKind.MAPPING:
            return MappingProxyType({})
        if isinstance(entry.value, MappingProxyType):
            return entry.value
        return MappingProxyType(entry.value)

    def get_adapter_states(self, name: str = "adapter-states") -> Optional[AdapterStates]:
        entry = self._values.get(name)
        if entry is None or entry.kind is not PropertyKind.ADAPTER_STATES:
            return None
        return entry.value

    def names(self) -> Iterator[str]:
        return iter(self._values)

    def snapshot(self) -> Dict[str, Any]:
        """Cópia plana `name -> valor`, adequada para serialização."""
        out: Dict[str, Any] = {}
        for name, entry in self._values.items():
            if entry.kind is PropertyKind.ADAPTER_STATES:
                out[name] = entry.value.as_property_map()
            elif entry.kind is PropertyKind.MAPPING:
                out[name] = plain_copy(entry.value)
            else:
                out[name] = entry.value
        return out
