"""Modelos del dominio (Pydantic v2).

Por qué Pydantic en el dominio:
- Nos da validación estricta y documentación autocontenida (Field) sin acoplar
  el Core a librerías de I/O.
- Facilita la serialización (`--json`) de las diferencias sin código extra.

Nota:
- Estos modelos describen *qué* es una diferencia, no *cómo* se muestra.
"""

from __future__ import annotations

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, computed_field
from pydantic.config import ConfigDict


class MissingInLeft(BaseModel):
    """La clave solo existe en el modelo derecho (model2)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["missing_in_left"] = "missing_in_left"
    key: str = Field(..., description="Clave tal como aparece en el registro derecho.")
    right_value: str = Field(..., description="Valor (recortado) en el modelo derecho.")


class MissingInRight(BaseModel):
    """La clave solo existe en el modelo izquierdo (model1)."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["missing_in_right"] = "missing_in_right"
    key: str = Field(..., description="Clave tal como aparece en el registro izquierdo.")
    left_value: str = Field(..., description="Valor (recortado) en el modelo izquierdo.")


class ValueMismatch(BaseModel):
    """La clave existe en ambos modelos con valores distintos."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["value_mismatch"] = "value_mismatch"
    key: str
    left_value: str
    right_value: str


DiffEntry = Annotated[
    Union[MissingInLeft, MissingInRight, ValueMismatch],
    Field(discriminator="kind"),
]


class DiffSummary(BaseModel):
    """Conteos por categoría de diferencia."""

    model_config = ConfigDict(frozen=True)

    missing_in_left: int = Field(default=0, ge=0)
    missing_in_right: int = Field(default=0, ge=0)
    values_differ: int = Field(default=0, ge=0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total(self) -> int:
        return self.missing_in_left + self.missing_in_right + self.values_differ

    @property
    def has_differences(self) -> bool:
        return self.total > 0
