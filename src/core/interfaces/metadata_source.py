"""Contrato de fuentes de metadatos de modelos.

Por qué Protocol:
- Define un contrato estructural (duck typing) sin herencia rígida.
- Permite que el colector basado en `ollama` sea intercambiable y que los
  tests usen fuentes falsas sin lanzar procesos.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from core.domain.record import CollectionResult


@runtime_checkable
class MetadataSource(Protocol):
    """Contrato mínimo para obtener el registro de un modelo.

    Reglas de diseño:
    - `collect` es bloqueante: las comparaciones son estrictamente secuenciales.
    - Nunca lanza excepciones; los fallos viajan en `CollectionResult.error`.
    """

    def collect(self, model_name: str) -> CollectionResult:
        """Obtiene y parsea los metadatos de `model_name`."""

        ...
