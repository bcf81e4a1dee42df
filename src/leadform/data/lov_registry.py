"""
Registro de listas de valores (LOV).

Cada código de LOV mapea a una secuencia ordenada de pares (valor, etiqueta).
El registro se construye una vez y se pasa explícitamente a los motores de
validación y formateo; no hay estado global.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from types import MappingProxyType
from typing import Any, Iterator, Mapping, Optional

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

DEFAULT_LOV_FILE = Path(__file__).parent / "lead_lov.json"


class LovOption(BaseModel):
    """Opción de una lista de valores."""

    model_config = ConfigDict(frozen=True)

    value: str
    label: str


class LovRegistry:
    """
    Registro de solo lectura de listas de valores.

    Example:
        >>> registry = LovRegistry.from_mapping({
        ...     "LEAD_STATUS_LOV": [{"value": "NEW", "label": "New"}],
        ... })
        >>> registry.label_for("LEAD_STATUS_LOV", "NEW")
        'New'
    """

    def __init__(self, tables: Mapping[str, Any]):
        """
        Args:
            tables: Dict código -> lista de LovOption o de dicts {value, label}

        Raises:
            ValueError: Si un código repite un valor
        """
        built = {}
        for code, entries in tables.items():
            options = tuple(
                entry if isinstance(entry, LovOption) else LovOption.model_validate(entry)
                for entry in entries
            )
            seen = set()
            for opt in options:
                if opt.value in seen:
                    raise ValueError(f"Valor duplicado '{opt.value}' en LOV {code}")
                seen.add(opt.value)
            built[code] = options

        self._tables = MappingProxyType(built)
        # Índice valor -> etiqueta por código
        self._labels = MappingProxyType({
            code: MappingProxyType({opt.value: opt.label for opt in options})
            for code, options in built.items()
        })

    # =========================================================================
    # Construcción
    # =========================================================================

    @classmethod
    def from_mapping(cls, tables: Mapping[str, Any]) -> "LovRegistry":
        return cls(tables)

    @classmethod
    def from_json(cls, path: Path) -> "LovRegistry":
        """
        Carga el registro desde un archivo JSON.

        El archivo es un objeto {código: [{"value": ..., "label": ...}, ...]}.
        """
        path = Path(path)
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"El archivo de LOV debe contener un objeto: {path}")
        registry = cls(data)
        logger.debug("LOV cargadas desde %s: %d códigos", path, len(registry))
        return registry

    @classmethod
    def default(cls) -> "LovRegistry":
        """Registro con las tablas incluidas en el paquete."""
        return cls.from_json(DEFAULT_LOV_FILE)

    @classmethod
    def empty(cls) -> "LovRegistry":
        return cls({})

    # =========================================================================
    # Consulta
    # =========================================================================

    def codes(self) -> list[str]:
        """Códigos registrados, en orden de carga."""
        return list(self._tables)

    def options(self, code: Optional[str]) -> tuple[LovOption, ...]:
        """Opciones de un código, o tupla vacía si no existe."""
        if not code:
            return ()
        return self._tables.get(code, ())

    def label_for(self, code: Optional[str], value: Any) -> Optional[str]:
        """
        Resuelve la etiqueta de un valor.

        Returns:
            Etiqueta o None si el código o el valor no están registrados
        """
        if not code:
            return None
        labels = self._labels.get(code)
        if labels is None:
            return None
        try:
            return labels.get(value)
        except TypeError:
            # Valor no hashable (ej: lista en un campo simple)
            return None

    def __contains__(self, code: object) -> bool:
        return code in self._tables

    def __len__(self) -> int:
        return len(self._tables)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tables)

    def __repr__(self) -> str:
        return f"LovRegistry(codes={self.codes()!r})"
