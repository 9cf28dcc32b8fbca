"""Registro plano de metadatos de un modelo.

Por qué no es un modelo Pydantic:
- Es un mapping de claves arbitrarias (derivadas del texto de la herramienta
  externa), no un esquema conocido.
- Las claves se comparan sin distinguir mayúsculas; un `dict` plano no lo hace.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field


def fold_key(key: str) -> str:
    """Clave de comparación case-insensitive carácter a carácter.

    `lower()` y no `casefold()`: `straße` y `STRASSE` son claves distintas.
    """

    return key.lower()


class ModelRecord(Mapping[str, str]):
    """Mapping inmutable `clave -> valor` con claves case-insensitive.

    Se conserva la primera grafía de cada clave para mostrarla en reportes.
    Construir un registro con dos claves que solo difieren en mayúsculas es un
    error: la desambiguación (`_1`, `_2`...) ocurre antes, en `ModelRecordBuilder`.
    """

    __slots__ = ("_entries",)

    def __init__(self, items: Mapping[str, str] | Iterable[tuple[str, str]] = ()) -> None:
        pairs = items.items() if isinstance(items, Mapping) else items
        entries: dict[str, tuple[str, str]] = {}
        for key, value in pairs:
            folded = fold_key(key)
            if folded in entries:
                raise ValueError(f"Duplicate key in record: {key!r}")
            entries[folded] = (key, value)
        self._entries = entries

    @classmethod
    def empty(cls) -> "ModelRecord":
        return cls()

    def __getitem__(self, key: str) -> str:
        if not isinstance(key, str):
            raise KeyError(key)
        try:
            return self._entries[fold_key(key)][1]
        except KeyError:
            raise KeyError(key) from None

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and fold_key(key) in self._entries

    def __iter__(self) -> Iterator[str]:
        for original, _ in self._entries.values():
            yield original

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"ModelRecord({dict(self.items())!r})"

    def canonical_key(self, key: str) -> str | None:
        """Grafía almacenada para `key`, o None si no existe."""

        entry = self._entries.get(fold_key(key))
        return entry[0] if entry else None

    def to_dict(self) -> dict[str, str]:
        return dict(self.items())


class ModelRecordBuilder:
    """Acumula pares clave/valor sin sobrescribir nunca una clave existente.

    Las claves repetidas (p.ej. varios `stop` en la misma sección) se guardan
    como `clave_1`, `clave_2`... usando el primer entero libre.
    """

    def __init__(self) -> None:
        self._pairs: list[tuple[str, str]] = []
        self._seen: set[str] = set()

    def add(self, key: str, value: str) -> str:
        """Inserta el par y devuelve la clave realmente usada."""

        unique_key = key
        index = 1
        while fold_key(unique_key) in self._seen:
            unique_key = f"{key}_{index}"
            index += 1

        self._seen.add(fold_key(unique_key))
        self._pairs.append((unique_key, value))
        return unique_key

    def build(self) -> ModelRecord:
        return ModelRecord(self._pairs)


@dataclass(frozen=True)
class CollectionResult:
    """Resultado de recolectar los metadatos de un modelo.

    `error` sustituye a las excepciones: el llamador decide si continuar,
    abortar o informar del fallo por modelo.
    """

    model_name: str
    record: ModelRecord = field(default_factory=ModelRecord)
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None
