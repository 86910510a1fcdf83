from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from unity_lisp import Fragment
from unity_lisp.types.forms import Form


@dataclass(frozen=True)
class MacroDefinition:
    params: tuple
    body: Form


class MacroRegistry:
    """
    Macro registry mapping macro names to their stored definitions.

    Expansion replaces a call site with a re-rendering of the stored body.
    Call-site arguments are not bound to the parameters: the parameter names
    are recorded but never consulted, so `(m)` and `(m 1 2 3)` render alike.

    The registry lives as long as the translation session that owns it; it is
    not file-scoped. `clear` is the only way to forget definitions.
    """

    def __init__(self):
        self.macros: dict[str, MacroDefinition] = {}
        # Names currently being expanded, to stop self-referencing bodies
        self.active: set[str] = set()

    def register(self, name: str, params, body: Form) -> Fragment:
        """Insert or overwrite `name`; returns the placeholder for the definition site."""
        self.macros[name] = MacroDefinition(tuple(params), body)
        return f"/* Defined macro {name} */ "

    def lookup(self, name: str) -> Optional[MacroDefinition]:
        return self.macros.get(name)

    def is_macro(self, name: str) -> bool:
        return name in self.macros

    def clear(self) -> None:
        self.macros.clear()

    def __len__(self) -> int:
        return len(self.macros)

    def __contains__(self, name: str) -> bool:
        return self.is_macro(name)
