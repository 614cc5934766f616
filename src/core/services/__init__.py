"""Servicios del Core.

Por qué:
- Orquestan el dominio a través de contratos (`core.interfaces`), sin I/O propio.
"""
