"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras y estrictas (Pydantic v2).
- El dominio no conoce netsh, PowerShell ni la consola: solo adaptadores,
  invocaciones y sus resultados.
"""
