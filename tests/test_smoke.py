# tests/test_smoke.py
"""
Teste de sanidade estrutural: o pacote importa e expõe a versão.

Não valida comportamento de domínio.
"""


def test_smoke():
    import bluetuith

    assert bluetuith.__version__
    assert "@" in bluetuith.VERSION
