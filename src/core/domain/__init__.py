"""Modelos y entidades del dominio.

Por qué:
- Aquí viven las estructuras de datos puras (registros, diferencias).
- El dominio no conoce procesos, CLI ni consola: solo conceptos del problema.
"""
