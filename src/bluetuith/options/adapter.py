# src/bluetuith/options/adapter.py
"""
Validadores que consultam o colaborador Bluetooth: `list-adapters`,
`adapter` e `connect-bdaddr`.

Adapters são identificados pelo último segmento do path (ex.: `hci0`)
e comparados por igualdade exata.
"""

from __future__ import annotations

from bluetuith.core.errors import AdapterNotFoundError, DeviceNotFoundError
from bluetuith.core.startup.context import StartupContext
from bluetuith.core.startup.types import ValidationResult, ValidationStatus


class ListAdaptersOption:
    """Lista os adapters conhecidos e encerra a inicialização (exit 0)."""

    id = "list-adapters"

    def run(self, ctx: StartupContext) -> ValidationResult:
        if not ctx.store.is_property_enabled(self.id):
            return ValidationResult(self.id, ValidationStatus.UNCHANGED, "not set")

        lines = ["List of adapters:"]
        lines.extend(f"- {adapter.base}" for adapter in ctx.bluetooth.get_adapters())

        return ValidationResult(
            self.id,
            ValidationStatus.TERMINATED,
            "listed adapters",
            output="\n".join(lines),
        )


class AdapterOption:
    id = "adapter"

    def run(self, ctx: StartupContext) -> ValidationResult:
        name = ctx.store.get_property(self.id)
        if name == "":
            ctx.bluetooth.set_current_adapter()
            current = ctx.bluetooth.get_current_adapter()
            return ValidationResult(
                self.id,
                ValidationStatus.UNCHANGED,
                f"default adapter: {current.base if current else 'none'}",
            )

        for adapter in ctx.bluetooth.get_adapters():
            if adapter.base == name:
                ctx.bluetooth.set_current_adapter(adapter)
                return ValidationResult(self.id, ValidationStatus.NORMALIZED, f"selected {name}")

        raise AdapterNotFoundError(
            f"{name}: The adapter does not exist.",
            details={"adapter": name},
            hint="Run with --list-adapters to see the available adapters.",
        )


class ConnectBDAddrOption:
    """
    Confirma que o endereço pertence a um device conhecido do adapter corrente.

    Sem endereço informado, ou sem adapter corrente, nada é feito.
    """

    id = "connect-bdaddr"

    def run(self, ctx: StartupContext) -> ValidationResult:
        address = ctx.store.get_property(self.id)
        if address == "":
            return ValidationResult(self.id, ValidationStatus.UNCHANGED, "not set")

        adapter = ctx.bluetooth.get_current_adapter()
        if adapter is None:
            return ValidationResult(self.id, ValidationStatus.UNCHANGED, "no current adapter")

        for device in ctx.bluetooth.get_devices():
            if device.address == address:
                ctx.store.add_property(self.id, device.address)
                return ValidationResult(self.id, ValidationStatus.NORMALIZED, f"device {address}")

        raise DeviceNotFoundError(
            f"No device with address '{address}' found on adapter "
            f"'{adapter.name}' ({adapter.base})",
            details={"address": address, "adapter": adapter.base},
        )
