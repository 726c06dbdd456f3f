# src/bluetuith/options/gsm.py
"""
Validador dos parâmetros de discagem GSM (`gsm-apn`, `gsm-number`).

Invariante: APN não vazio exige número não vazio. Sem APN e sem número,
o número assume o valor canônico `*99#`.
"""

from __future__ import annotations

from dataclasses import dataclass

from bluetuith.core.errors import OptionFormatError
from bluetuith.core.startup.context import StartupContext
from bluetuith.core.startup.types import ValidationResult, ValidationStatus

DEFAULT_GSM_NUMBER = "*99#"


@dataclass(frozen=True)
class GsmParameters:
    apn: str
    number: str


def resolve_gsm(apn: str, number: str) -> GsmParameters:
    if number == "" and apn != "":
        raise OptionFormatError(
            "Specify GSM Number.",
            details={"gsm-apn": apn},
            hint="Use --gsm-number together with --gsm-apn.",
        )

    return GsmParameters(apn=apn, number=number or DEFAULT_GSM_NUMBER)


class GsmOption:
    id = "gsm"

    def run(self, ctx: StartupContext) -> ValidationResult:
        params = resolve_gsm(
            ctx.store.get_property("gsm-apn"),
            ctx.store.get_property("gsm-number"),
        )

        ctx.store.add_property("gsm-apn", params.apn)
        ctx.store.add_property("gsm-number", params.number)

        return ValidationResult(
            self.id,
            ValidationStatus.NORMALIZED,
            f"dial {params.number}",
            payload={"apn": params.apn, "number": params.number},
        )
