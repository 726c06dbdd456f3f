# tests/conftest.py
"""
Fixtures compartilhados para testes do bluetuith.

Este módulo fornece:
- conteúdo YAML de arquivo de configuração semelhante ao uso real
- um colaborador Bluetooth em memória com dois adapters
- um motor de tema com a tabela default de elementos
- uma fábrica de StartupContext sobre um store já resolvido

Decisões:
    - Fixtures não acessam hardware nem o diretório real do usuário
    - Filesystem apenas via `tmp_path`
"""

from pathlib import Path

import pytest

from bluetuith.bluez import Adapter, Device, StaticBluetooth
from bluetuith.core.config.schema import OPTIONS
from bluetuith.core.config.store import PropertyStore
from bluetuith.core.startup.context import StartupContext
from bluetuith.theme import Theme


@pytest.fixture
def project_like_config_yaml() -> str:
    """
    Conteúdo típico de um `bluetuith.conf` do usuário.

    Usado por:
        - testes do loader (arquivo + flags)
        - testes de ponta a ponta do CLI
    """
    return """\
adapter: hci0
receive-dir: /tmp
gsm-apn: internet
gsm-number: 5551234
adapter-states: "powered:yes,scan:no"
confirm-on-quit: true
theme:
  Adapter: red
  Device: "#00ff00"
"""


@pytest.fixture
def bluetooth() -> StaticBluetooth:
    hci0 = Adapter(name="laptop", path="/org/bluez/hci0", address="00:11:22:33:44:55")
    hci1 = Adapter(name="dongle", path="/org/bluez/hci1", address="66:77:88:99:AA:BB")
    return StaticBluetooth(
        adapters=[hci0, hci1],
        devices={
            "hci0": [Device(address="AA:BB:CC:DD:EE:FF", name="headset")],
            "hci1": [Device(address="11:22:33:44:55:66", name="phone")],
        },
    )


@pytest.fixture
def theme() -> Theme:
    return Theme()


@pytest.fixture
def make_ctx(tmp_path: Path, bluetooth, theme):
    """
    Fábrica de StartupContext.

    Os valores informados sobrescrevem os defaults do registro, simulando
    a saída do loader sem passar por flags nem arquivo.
    """

    def _make(values=None):
        resolved = {option.name: option.default_value() for option in OPTIONS}
        resolved.update(values or {})
        return StartupContext(
            store=PropertyStore.from_mapping(resolved),
            config_path=tmp_path / "bluetuith.conf",
            bluetooth=bluetooth,
            theme=theme,
            version="1.2.3@abcdef",
        )

    return _make
