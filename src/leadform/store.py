"""
Lectura y escritura de registros en archivos JSON.

Es el colaborador de envío que usa la CLI: el núcleo de validación no
depende de este módulo.
"""

import json
import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any

logger = logging.getLogger(__name__)


def generate_id() -> str:
    """Genera un ID corto único (8 caracteres)."""
    return str(uuid.uuid4())[:8]


def generate_timestamp() -> str:
    """Genera timestamp ISO actual."""
    return datetime.now().isoformat()


def load_record(path: Path) -> dict[str, Any]:
    """
    Lee un registro desde un archivo JSON.

    Raises:
        FileNotFoundError: Si el archivo no existe
        ValueError: Si el JSON no es un objeto
    """
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"Registro no encontrado: {path}")
    with open(path, encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"JSON inválido en {path}: {e}") from e
    if not isinstance(data, dict):
        raise ValueError(f"El registro debe ser un objeto JSON: {path}")
    # Archivos escritos por RecordStore
    if "saved_at" in data and isinstance(data.get("record"), dict):
        return data["record"]
    return data


class RecordStore:
    """
    Guarda registros enviados como archivos JSON en un directorio.

    Cada archivo se llama lead_<id>.json; si el registro no trae lead_id
    se le asigna uno.
    """

    def __init__(self, directory: Path):
        self.directory = Path(directory)

    def save(self, record: dict[str, Any]) -> Path:
        """
        Guarda el registro y retorna la ruta escrita.

        Args:
            record: Registro ya validado

        Raises:
            ValueError: Si el lead_id no sirve como nombre de archivo
        """
        record = dict(record)
        if not record.get("lead_id"):
            record["lead_id"] = generate_id()

        lead_id = str(record["lead_id"])
        if Path(lead_id).name != lead_id or "\\" in lead_id:
            raise ValueError(f"lead_id no válido como nombre de archivo: {lead_id!r}")

        self.directory.mkdir(parents=True, exist_ok=True)
        path = self.directory / f"lead_{lead_id}.json"
        payload = {"saved_at": generate_timestamp(), "record": record}
        with open(path, "w", encoding="utf-8") as f:
            json.dump(payload, f, indent=2, ensure_ascii=False, default=str)

        logger.info("Registro guardado en %s", path)
        return path

    def __call__(self, record: dict[str, Any]) -> bool:
        """Permite usar el store directamente como colaborador de envío."""
        self.save(record)
        return True
