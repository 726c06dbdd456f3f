# tests/options/test_receive_dir.py
"""
Testes do validador de `receive-dir`.
"""

from pathlib import Path

import pytest

from bluetuith.core.errors import DirectoryNotAccessibleError
from bluetuith.core.startup.types import ValidationStatus
from bluetuith.options.receive_dir import ReceiveDirOption


def test_existing_directory_is_accepted(make_ctx, tmp_path: Path):
    ctx = make_ctx({"receive-dir": str(tmp_path)})

    result = ReceiveDirOption().run(ctx)

    assert result.status is ValidationStatus.NORMALIZED
    assert ctx.store.get_property("receive-dir") == str(tmp_path)


def test_unset_is_noop(make_ctx):
    assert ReceiveDirOption().run(make_ctx()).status is ValidationStatus.UNCHANGED


def test_missing_directory_fails(make_ctx, tmp_path: Path):
    missing = tmp_path / "nope"

    with pytest.raises(DirectoryNotAccessibleError) as excinfo:
        ReceiveDirOption().run(make_ctx({"receive-dir": str(missing)}))

    assert str(excinfo.value) == f"{missing}: Directory is not accessible."


def test_regular_file_fails(make_ctx, tmp_path: Path):
    file_path = tmp_path / "file.txt"
    file_path.write_text("x", encoding="utf-8")

    with pytest.raises(DirectoryNotAccessibleError):
        ReceiveDirOption().run(make_ctx({"receive-dir": str(file_path)}))
