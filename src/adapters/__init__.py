"""Adaptadores de I/O.

Por qué un paquete aparte:
- Todo lo que toca procesos externos o formatos de salida vive aquí.
- El Core solo conoce el contrato `MetadataSource`.
"""
