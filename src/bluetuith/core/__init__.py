# src/bluetuith/core/__init__.py
"""
Núcleo da resolução de configuração do bluetuith.

Subpacotes:
    - config  → schema, flags, arquivo, overlay e PropertyStore
    - startup → contexto, registro e orquestração dos validadores
    - errors  → hierarquia canônica de exceções

Este pacote não depende do restante da aplicação (UI, transporte).
"""
