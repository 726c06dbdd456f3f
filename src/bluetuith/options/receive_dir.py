# src/bluetuith/options/receive_dir.py
"""Validador de `receive-dir`: o caminho deve existir e ser um diretório."""

from __future__ import annotations

import os

from bluetuith.core.errors import DirectoryNotAccessibleError
from bluetuith.core.startup.context import StartupContext
from bluetuith.core.startup.types import ValidationResult, ValidationStatus


class ReceiveDirOption:
    id = "receive-dir"

    def run(self, ctx: StartupContext) -> ValidationResult:
        path = ctx.store.get_property(self.id)
        if path == "":
            return ValidationResult(self.id, ValidationStatus.UNCHANGED, "not set")

        if os.path.isdir(path):
            ctx.store.add_property(self.id, path)
            return ValidationResult(self.id, ValidationStatus.NORMALIZED, path)

        raise DirectoryNotAccessibleError(
            f"{path}: Directory is not accessible.",
            details={"path": path},
        )
