"""Modelos Pydantic para configuración de campos y de la aplicación."""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

logger = logging.getLogger(__name__)


class DataType(str, Enum):
    """Tipos de dato de un campo configurable."""
    TEXT = "TEXT"
    EMAIL = "EMAIL"
    PHONE = "PHONE"
    NUMBER = "NUMBER"
    DATE = "DATE"
    DROPDOWN = "DROPDOWN"
    MULTISELECT = "MULTISELECT"
    USER = "USER"
    TEXTAREA = "TEXTAREA"


# Tipos cuyo valor se resuelve contra una lista de valores (LOV)
LOV_TYPES = frozenset({DataType.DROPDOWN, DataType.MULTISELECT, DataType.USER})


# ============================================================================
# Descriptor de campo
# ============================================================================

class FieldSchema(BaseModel):
    """
    Descriptor inmutable de un campo del registro.

    Los nombres de atributo son snake_case; el JSON de origen usa camelCase
    (columnName, displayName, dataType...) y se carga sin transformar.
    """

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    # Identidad
    column_name: str = Field(..., min_length=1, description="Clave estable del campo")
    display_name: str = Field(..., description="Etiqueta visible")
    data_type: DataType = Field(..., description="Tipo de dato")

    # Restricciones
    required: bool = False
    min_value: Optional[str] = None
    max_value: Optional[str] = None
    regex_pattern: Optional[str] = None
    regex_message: Optional[str] = None
    db_length: Optional[int] = Field(None, ge=0, description="Longitud máxima")
    db_precision: Optional[int] = Field(None, ge=0)
    db_scale: Optional[int] = Field(None, ge=0, description="Decimales a mostrar")
    lov_code: Optional[str] = None
    default_value: Optional[str] = None

    # Presentación (solo la usa la capa de vista)
    placeholder_text: str = ""
    help_text: str = ""
    editable: bool = True
    visible: bool = True
    display_order: int = 0

    @field_validator("min_value", "max_value", "default_value", mode="before")
    @classmethod
    def number_to_str(cls, v):
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        return v

    @field_validator("placeholder_text", "help_text", mode="before")
    @classmethod
    def none_to_empty(cls, v):
        return "" if v is None else v

    @model_validator(mode="after")
    def warn_missing_lov(self) -> "FieldSchema":
        if self.data_type in LOV_TYPES and not self.lov_code:
            logger.warning(
                "Campo %s (%s) sin lovCode: se mostrará el valor crudo",
                self.column_name, self.data_type.value,
            )
        return self

    @property
    def key(self) -> str:
        return self.column_name

    @property
    def label(self) -> str:
        return self.display_name

    @property
    def uses_lov(self) -> bool:
        """True si el tipo se resuelve contra una LOV."""
        return self.data_type in LOV_TYPES

    @property
    def is_multi_valued(self) -> bool:
        return self.data_type == DataType.MULTISELECT


# ============================================================================
# Configuración de la aplicación
# ============================================================================

DEFAULT_DATA_DIR = Path.home() / ".leadform"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppSettings(BaseModel):
    """Configuración de rutas y logging de la CLI."""

    data_dir: Path = Field(default=DEFAULT_DATA_DIR, description="Directorio de trabajo")
    schema_path: Optional[Path] = Field(None, description="JSON de campos (None = esquema incluido)")
    lov_path: Optional[Path] = Field(None, description="JSON de LOVs (None = tablas incluidas)")
    output_dir: Optional[Path] = Field(None, description="Destino de registros guardados")
    log_level: str = "WARNING"

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"Nivel de log desconocido: {v}")
        return level

    @property
    def leads_dir(self) -> Path:
        """Directorio donde se guardan los registros enviados."""
        return self.output_dir or self.data_dir / "leads"

    @classmethod
    def from_env(cls, environ: Optional[dict] = None) -> "AppSettings":
        """
        Construye la configuración desde variables de entorno.

        Variables: LEADFORM_HOME, LEADFORM_SCHEMA, LEADFORM_LOV,
        LEADFORM_OUTPUT, LEADFORM_LOG_LEVEL.
        """
        env = os.environ if environ is None else environ
        values = {}
        if env.get("LEADFORM_HOME"):
            values["data_dir"] = Path(env["LEADFORM_HOME"]).expanduser()
        if env.get("LEADFORM_SCHEMA"):
            values["schema_path"] = Path(env["LEADFORM_SCHEMA"]).expanduser()
        if env.get("LEADFORM_LOV"):
            values["lov_path"] = Path(env["LEADFORM_LOV"]).expanduser()
        if env.get("LEADFORM_OUTPUT"):
            values["output_dir"] = Path(env["LEADFORM_OUTPUT"]).expanduser()
        if env.get("LEADFORM_LOG_LEVEL"):
            values["log_level"] = env["LEADFORM_LOG_LEVEL"]
        return cls(**values)
