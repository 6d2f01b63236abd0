"""Interfaces/abstracciones del Core.

Por qué:
- Define contratos (Protocol) para ejecutar comandos y enumerar interfaces.
- El Core depende de estos contratos; PowerShell y subprocess son adaptadores.
"""
