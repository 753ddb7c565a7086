"""Modelos, enums y errores del dominio.

Aquí viven las estructuras de datos puras (Pydantic v2) y la taxonomía de
errores. El dominio no conoce la CLI ni el sistema de ficheros.
"""
