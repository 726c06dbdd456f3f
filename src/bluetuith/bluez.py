# src/bluetuith/bluez.py
"""
Interface de enumeração de adapters e devices Bluetooth.

A resolução de configuração consulta este colaborador apenas para leitura
(listar adapters, selecionar o adapter corrente, listar devices conhecidos).
Nenhuma operação de transporte Bluetooth existe aqui.

Implementações fornecidas:
    - StaticBluetooth → tabela em memória (testes e integração)
    - SysfsBluetooth  → adapters de `/sys/class/bluetooth` e devices
                        conhecidos do cache do BlueZ em `/var/lib/bluetooth`

A aplicação pode injetar qualquer objeto que satisfaça `Bluetooth`.
"""

from __future__ import annotations

import posixpath
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Protocol, Sequence, runtime_checkable

BDADDR_RE = re.compile(r"^[0-9A-F]{2}(?::[0-9A-F]{2}){5}$")


@dataclass(frozen=True)
class Adapter:
    name: str
    path: str
    address: str = ""

    @property
    def base(self) -> str:
        """Identificador curto do adapter (último segmento do path, ex.: hci0)."""
        return posixpath.basename(self.path.rstrip("/"))


@dataclass(frozen=True)
class Device:
    address: str
    name: str = ""


@runtime_checkable
class Bluetooth(Protocol):
    def get_adapters(self) -> List[Adapter]:
        ...

    def get_current_adapter(self) -> Optional[Adapter]:
        ...

    def set_current_adapter(self, adapter: Optional[Adapter] = None) -> None:
        """Seleciona `adapter`, ou o adapter default quando None."""
        ...

    def get_devices(self) -> List[Device]:
        """Devices conhecidos do adapter corrente."""
        ...


@dataclass
class StaticBluetooth:
    """Colaborador em memória: devices indexados pelo `base` do adapter."""

    adapters: List[Adapter] = field(default_factory=list)
    devices: Dict[str, List[Device]] = field(default_factory=dict)
    current: Optional[Adapter] = None

    def get_adapters(self) -> List[Adapter]:
        return list(self.adapters)

    def get_current_adapter(self) -> Optional[Adapter]:
        return self.current

    def set_current_adapter(self, adapter: Optional[Adapter] = None) -> None:
        if adapter is None:
            adapter = self.adapters[0] if self.adapters else None
        self.current = adapter

    def get_devices(self) -> List[Device]:
        if self.current is None:
            return []
        return list(self.devices.get(self.current.base, []))


class SysfsBluetooth:
    """
    Enumeração a partir do sistema de arquivos (Linux).

    - adapters: entradas `hciN` em `/sys/class/bluetooth`; o path segue o
      formato do BlueZ (`/org/bluez/hciN`)
    - devices: subdiretórios com formato de BD address sob
      `/var/lib/bluetooth/<adapter>/`; diretórios ilegíveis são ignorados

    O cache do BlueZ é indexado pelo endereço do adapter, que o sysfs nem
    sempre expõe; por isso os devices de todos os adapters são agregados.
    """

    def __init__(
        self,
        sysfs_root: Path = Path("/sys/class/bluetooth"),
        storage_root: Path = Path("/var/lib/bluetooth"),
    ) -> None:
        self.sysfs_root = Path(sysfs_root)
        self.storage_root = Path(storage_root)
        self._current: Optional[Adapter] = None

    def get_adapters(self) -> List[Adapter]:
        try:
            entries = sorted(p.name for p in self.sysfs_root.iterdir())
        except OSError:
            return []

        adapters: List[Adapter] = []
        for entry in entries:
            if not re.fullmatch(r"hci\d+", entry):
                continue
            adapters.append(Adapter(name=self._read_name(entry), path=f"/org/bluez/{entry}"))
        return adapters

    def _read_name(self, entry: str) -> str:
        try:
            return (self.sysfs_root / entry / "name").read_text(encoding="utf-8").strip() or entry
        except OSError:
            return entry

    def get_current_adapter(self) -> Optional[Adapter]:
        return self._current

    def set_current_adapter(self, adapter: Optional[Adapter] = None) -> None:
        if adapter is None:
            adapters = self.get_adapters()
            adapter = adapters[0] if adapters else None
        self._current = adapter

    def get_devices(self) -> List[Device]:
        if self._current is None:
            return []
        return [Device(address=a) for a in self._known_addresses(self._adapter_dirs())]

    def _adapter_dirs(self) -> Sequence[Path]:
        try:
            return sorted(p for p in self.storage_root.iterdir() if p.is_dir())
        except OSError:
            return []

    def _known_addresses(self, adapter_dirs: Sequence[Path]) -> List[str]:
        seen: List[str] = []
        for adapter_dir in adapter_dirs:
            try:
                names = sorted(p.name for p in adapter_dir.iterdir() if p.is_dir())
            except OSError:
                continue
            for name in names:
                if BDADDR_RE.match(name) and name not in seen:
                    seen.append(name)
        return seen
