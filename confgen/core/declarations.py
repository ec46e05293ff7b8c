"""
Declaration classification and rendering.

Each entry becomes either a Final constant or a variable evaluated when the
generated module is imported.
"""

from enum import Enum

from confgen.config.names import CONFDIR_MARKER, RELOCATABLE_NAMES, SUID_INSTALL_NAME
from confgen.core.extract import ConfigEntry


class DeclarationKind(Enum):
    """How an entry is declared in the generated module."""

    CONSTANT = "constant"
    RELOCATABLE = "relocatable"
    SUID_INSTALL = "suid-install"
    DERIVED = "derived"

    @property
    def is_variable(self) -> bool:
        """Whether the value is only known at import time."""
        return self is not DeclarationKind.CONSTANT


def classify(entry: ConfigEntry) -> DeclarationKind:
    """
    Classify an entry by name, falling back to its value text.

    Precedence: relocatable names, the suid flag, values mentioning the
    confdir, then plain constants.
    """
    if entry.name in RELOCATABLE_NAMES:
        return DeclarationKind.RELOCATABLE
    if entry.name == SUID_INSTALL_NAME:
        return DeclarationKind.SUID_INSTALL
    # Textual check, not a dependency graph
    if CONFDIR_MARKER in entry.expression:
        return DeclarationKind.DERIVED
    return DeclarationKind.CONSTANT


def right_hand_side(entry: ConfigEntry, kind: DeclarationKind) -> str:
    """Expression assigned to the entry's name."""
    if kind is DeclarationKind.RELOCATABLE:
        return f"relocate_path({entry.expression})"
    if kind is DeclarationKind.SUID_INSTALL:
        return "is_suid_install()"
    return entry.expression


def render_declaration(entry: ConfigEntry) -> str:
    """Render one entry as a line of Python source."""
    kind = classify(entry)
    rhs = right_hand_side(entry, kind)
    if kind.is_variable:
        return f"{entry.name} = {rhs}"
    return f"{entry.name}: Final = {rhs}"
