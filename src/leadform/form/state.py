"""
Estado de interacción del formulario.

Mantiene la copia de trabajo del registro, los campos ya visitados
(touched) y el error actual de cada campo. Valida al salir de un campo
(blur) y el formulario completo al enviar.
"""

import inspect
import logging
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Dict, List, Mapping, Optional, Set, Tuple, Union

from leadform.config import FieldSchema
from leadform.core.validation import (
    ValidationFailure,
    failures_by_field,
    is_empty,
    validate_field,
    validate_record,
)

from .models import FieldStatus, SubmitOutcome, SubmitStatus

logger = logging.getLogger(__name__)

# Colaborador de envío: recibe el registro, puede ser async.
# Devolver False significa rechazo; cualquier otro valor, aceptación.
SubmitHandler = Callable[[Dict[str, Any]], Union[Any, Awaitable[Any]]]


def _default_for(fld: FieldSchema) -> Any:
    """Valor inicial de un campo en el flujo de creación."""
    if fld.default_value is None:
        return None
    if fld.is_multi_valued:
        return [v.strip() for v in fld.default_value.split(",") if v.strip()]
    return fld.default_value


@dataclass
class FormState:
    """Estado del formulario para una sesión de captura o edición."""
    fields: List[FieldSchema]
    record: Dict[str, Any] = field(default_factory=dict)
    touched: Set[str] = field(default_factory=set)
    errors: Dict[str, str] = field(default_factory=dict)
    submit_attempted: bool = False
    submitting: bool = False  # True mientras el colaborador está pendiente

    @classmethod
    def create(
        cls,
        fields: List[FieldSchema],
        initial: Optional[Mapping[str, Any]] = None,
    ) -> "FormState":
        """
        Crea el estado para un formulario.

        Args:
            fields: Esquema del registro
            initial: Registro existente (edición). Si es None (creación),
                se usan los default_value del esquema.
        """
        if initial is not None:
            record = dict(initial)
        else:
            record = {}
            for fld in fields:
                default = _default_for(fld)
                if default is not None:
                    record[fld.key] = default
        return cls(fields=list(fields), record=record)

    # =========================================================================
    # Consultas
    # =========================================================================

    def get_field(self, key: str) -> Optional[FieldSchema]:
        """Obtiene un campo por su key."""
        for f in self.fields:
            if f.key == key:
                return f
        return None

    @property
    def visible_fields(self) -> List[FieldSchema]:
        return [f for f in self.fields if f.visible]

    def get_values(self) -> Dict[str, Any]:
        """Retorna una copia del registro de trabajo."""
        return dict(self.record)

    def display_error(self, key: str) -> Optional[str]:
        """
        Error a mostrar para un campo.

        Solo se muestra si el campo fue visitado o si ya hubo un intento
        de envío.
        """
        if key in self.touched or self.submit_attempted:
            return self.errors.get(key)
        return None

    def field_status(self, key: str) -> FieldStatus:
        """Estado visual de un campo."""
        fld = self.get_field(key)
        if fld is None:
            raise KeyError(key)
        if key in self.errors:
            return FieldStatus.INVALID
        if is_empty(self.record.get(key)):
            return FieldStatus.EMPTY if fld.required else FieldStatus.OPTIONAL
        return FieldStatus.FILLED

    def count_filled(self) -> Tuple[int, int]:
        """Retorna (campos_llenos, campos_requeridos) entre los visibles."""
        visible = self.visible_fields
        filled = sum(1 for f in visible if not is_empty(self.record.get(f.key)))
        required = sum(1 for f in visible if f.required)
        return filled, required

    def validate_all(self) -> List[ValidationFailure]:
        """Valida todos los campos visibles sin modificar el estado."""
        return validate_record(self.fields, self.record, visible_only=True)

    def is_complete(self) -> bool:
        """True si el registro pasaría la validación de envío."""
        return not self.validate_all()

    # =========================================================================
    # Transiciones
    # =========================================================================

    def change_value(self, key: str, value: Any) -> None:
        """
        Actualiza el valor de un campo.

        Limpia el error del campo sin revalidar; la validación se hace
        en blur o al enviar.
        """
        self.record[key] = value
        self.errors.pop(key, None)

    def blur(self, key: str) -> Optional[ValidationFailure]:
        """
        Marca el campo como visitado y lo valida.

        Returns:
            La falla encontrada o None

        Raises:
            KeyError: Si el campo no está en el esquema
        """
        fld = self.get_field(key)
        if fld is None:
            raise KeyError(key)

        self.touched.add(key)
        failure = validate_field(fld, self.record.get(key))
        if failure is not None:
            self.errors[key] = failure.message
        else:
            self.errors.pop(key, None)
        return failure

    async def submit(self, on_submit: SubmitHandler) -> SubmitOutcome:
        """
        Valida el formulario completo y, si no hay fallas, lo envía.

        Con fallas, reemplaza todos los errores por los nuevos y no llama
        al colaborador. Las excepciones del colaborador se propagan.

        Args:
            on_submit: Colaborador que recibe una copia del registro

        Returns:
            SubmitOutcome con el estado y las fallas
        """
        self.submit_attempted = True
        failures = self.validate_all()
        if failures:
            self.errors = failures_by_field(failures)
            logger.info("Envío bloqueado: %d campo(s) con errores", len(failures))
            return SubmitOutcome(status=SubmitStatus.INVALID, failures=failures)

        self.errors = {}
        self.submitting = True
        try:
            result = on_submit(self.get_values())
            if inspect.isawaitable(result):
                result = await result
        finally:
            self.submitting = False

        if result is False:
            logger.info("El colaborador rechazó el registro")
            return SubmitOutcome(status=SubmitStatus.REJECTED)
        logger.debug("Registro enviado")
        return SubmitOutcome(status=SubmitStatus.SUBMITTED)
