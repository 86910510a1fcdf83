"""Special form: defmacro.

Registers a macro in the session's registry. The definition site renders to a
placeholder comment; later calls render the stored body (see dispatcher).
"""

from __future__ import annotations

from unity_lisp import Form, Fragment, RenderFn
from unity_lisp.debug_utils.pprint import pprint_form
from unity_lisp.types.forms import VectorForm, Word
from unity_lisp.types.macro_registry import MacroRegistry


def defmacro_form(tail: list[Form], macros: MacroRegistry, render_fn: RenderFn) -> Fragment | None:
    """(defmacro name [params] body) with exactly one body form."""
    match tail:
        case [Word(macro_name), VectorForm(params), body]:
            return macros.register(macro_name, [pprint_form(p) for p in params], body)
    return None
