"""
Captura interactiva de un registro.

Recorre los campos visibles con questionary, valida cada campo al salir
(blur) y envía el registro completo al final. El envío lo recibe un
RecordStore que escribe el JSON.
"""

import asyncio
from pathlib import Path
from typing import Annotated, Any, Callable, Optional

import questionary
import typer
from questionary import Choice, Style

from leadform.cli.common import (
    get_settings,
    load_fields_or_exit,
    load_record_or_exit,
    load_registry_or_exit,
    warn_unresolved_lovs,
)
from leadform.cli.theme import (
    get_palette,
    print_error,
    print_failures,
    print_header,
    print_info,
    print_success,
    print_warning,
)
from leadform.config import DataType, FieldSchema
from leadform.data import LovRegistry
from leadform.form import FormState, SubmitHandler, SubmitStatus
from leadform.store import RecordStore

# Marca de cancelación (Ctrl+C en questionary devuelve None)
CANCELLED = object()

Prompter = Callable[[FieldSchema, Any, LovRegistry], Any]


def get_form_style() -> Style:
    """Estilo de questionary basado en el tema actual."""
    p = get_palette()
    return Style([
        ('qmark', f'fg:{p.lov} bold'),
        ('question', 'bold'),
        ('answer', f'fg:{p.ok} bold'),
        ('pointer', f'fg:{p.lov} bold'),
        ('highlighted', f'fg:{p.title} bold'),
        ('selected', f'fg:{p.ok} bold'),
        ('instruction', f'fg:{p.faint} italic'),
        ('text', ''),
        ('disabled', f'fg:{p.faint} italic'),
    ])


def _question_text(fld: FieldSchema) -> str:
    text = f"{fld.label}{' *' if fld.required else ''}:"
    if fld.help_text:
        text += f" ({fld.help_text})"
    return text


def prompt_field(fld: FieldSchema, current: Any, registry: LovRegistry) -> Any:
    """
    Pide el valor de un campo según su tipo.

    Returns:
        El valor ingresado, o CANCELLED si el usuario interrumpe
    """
    style = get_form_style()
    question = _question_text(fld)
    options = registry.options(fld.lov_code)

    if fld.data_type == DataType.MULTISELECT and options:
        selected = current if isinstance(current, list) else []
        answer = questionary.checkbox(
            question,
            choices=[
                Choice(opt.label, value=opt.value, checked=opt.value in selected)
                for opt in options
            ],
            style=style,
        ).ask()

    elif fld.uses_lov and options:
        choices = [Choice(opt.label, value=opt.value) for opt in options]
        if not fld.required:
            choices.append(Choice("(sin valor)", value=""))
        values = [c.value for c in choices]
        answer = questionary.select(
            question,
            choices=choices,
            default=current if current in values else None,
            style=style,
        ).ask()

    else:
        # Texto libre; sin LOV resoluble los enumerables también caen aquí
        if current is None:
            default = ""
        elif isinstance(current, list):
            default = ", ".join(str(v) for v in current)
        else:
            default = str(current)
        answer = questionary.text(
            question,
            default=default,
            instruction=fld.placeholder_text or None,
            multiline=fld.data_type == DataType.TEXTAREA,
            style=style,
        ).ask()
        if isinstance(answer, str):
            answer = answer.strip()
            if fld.is_multi_valued:
                answer = [v.strip() for v in answer.split(",") if v.strip()]

    return CANCELLED if answer is None else answer


def _edit_field(
    state: FormState,
    fld: FieldSchema,
    registry: LovRegistry,
    prompt: Prompter,
) -> bool:
    """
    Pide un campo hasta que pase la validación de blur.

    Returns:
        False si el usuario canceló
    """
    while True:
        value = prompt(fld, state.record.get(fld.key), registry)
        if value is CANCELLED:
            return False
        state.change_value(fld.key, value)
        failure = state.blur(fld.key)
        if failure is None:
            return True
        print_error(failure.message)


def run_capture(
    state: FormState,
    registry: LovRegistry,
    on_submit: SubmitHandler,
    prompt: Optional[Prompter] = None,
) -> Optional[SubmitStatus]:
    """
    Ejecuta la captura completa sobre un FormState.

    Returns:
        SubmitStatus final, o None si el usuario canceló
    """
    prompt = prompt or prompt_field
    pending = [f for f in state.visible_fields if f.editable]

    while True:
        for fld in pending:
            if not _edit_field(state, fld, registry, prompt):
                return None

        outcome = asyncio.run(state.submit(on_submit))
        if outcome.status != SubmitStatus.INVALID:
            return outcome.status

        print_failures(outcome.failures, {f.key: f for f in state.fields})
        failing = {failure.field for failure in outcome.failures}
        pending = [f for f in state.visible_fields if f.key in failing]
        locked = [f for f in pending if not f.editable]
        if locked:
            print_error(
                "Campos no editables con errores: " + ", ".join(f.label for f in locked)
            )
            return SubmitStatus.INVALID


def capture_command(
    initial: Annotated[Optional[Path], typer.Option("--initial", "-i", help="Registro JSON a editar")] = None,
    output: Annotated[Optional[Path], typer.Option("--output", "-o", help="Directorio de salida")] = None,
    schema: Annotated[Optional[Path], typer.Option("--schema", "-s", help="JSON de campos")] = None,
    lov: Annotated[Optional[Path], typer.Option("--lov", help="JSON de listas de valores")] = None,
):
    """
    Captura un lead de forma interactiva y lo guarda en JSON.

    Sin --initial crea un registro nuevo con los valores por defecto
    del esquema; con --initial edita el registro indicado.

    Ejemplos:
        leadform capture
        leadform capture --initial lead.json -o ./leads
    """
    fields = load_fields_or_exit(schema)
    registry = load_registry_or_exit(lov)
    warn_unresolved_lovs(fields, registry)

    record = load_record_or_exit(initial) if initial else None
    state = FormState.create(fields, record)
    store = RecordStore(output or get_settings().leads_dir)

    print_header("CAPTURA DE LEAD", "Ctrl+C para cancelar")
    try:
        status = run_capture(state, registry, store)
    except ValueError as e:
        print_error(f"No se pudo guardar el lead: {e}")
        raise typer.Exit(1)

    if status is None:
        print_warning("Captura cancelada")
        raise typer.Exit(1)
    if status != SubmitStatus.SUBMITTED:
        print_error("El registro no se guardó")
        raise typer.Exit(1)

    filled, required = state.count_filled()
    print_success(f"Lead guardado en {store.directory}")
    print_info(f"{filled} campos con valor ({required} requeridos)")
