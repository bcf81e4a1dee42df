"""
Tema de la CLI: paletas, textos estilizados y tablas Rich.

- palette: paletas y consola compartida (CLITheme)
- styled: constructores de Text/Panel
- printing: mensajes a consola
- tables: tablas de esquema, LOV y registro
"""

from leadform.cli.theme.palette import (
    ThemeName,
    ColorPalette,
    THEME_DEFAULT,
    THEME_MINIMAL,
    THEMES,
    CLITheme,
    get_console,
    get_palette,
)

from leadform.cli.theme.styled import (
    MESSAGE_MARKS,
    styled_header,
    styled_field_label,
    styled_value,
    styled_message,
)

from leadform.cli.theme.printing import (
    print_header,
    print_success,
    print_warning,
    print_error,
    print_info,
    print_failures,
)

from leadform.cli.theme.tables import (
    NOT_PROVIDED,
    form_table,
    print_schema_table,
    print_lov_table,
    print_record_table,
)

__all__ = [
    # Palette
    "ThemeName",
    "ColorPalette",
    "THEME_DEFAULT",
    "THEME_MINIMAL",
    "THEMES",
    "CLITheme",
    "get_console",
    "get_palette",
    # Styled
    "MESSAGE_MARKS",
    "styled_header",
    "styled_field_label",
    "styled_value",
    "styled_message",
    # Printing
    "print_header",
    "print_success",
    "print_warning",
    "print_error",
    "print_info",
    "print_failures",
    # Tables
    "NOT_PROVIDED",
    "form_table",
    "print_schema_table",
    "print_lov_table",
    "print_record_table",
]
