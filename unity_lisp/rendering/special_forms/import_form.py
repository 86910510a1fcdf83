from __future__ import annotations

from unity_lisp import Form, Fragment, RenderFn
from unity_lisp.rendering import templates as t
from unity_lisp.types.forms import Word
from unity_lisp.types.macro_registry import MacroRegistry


def import_form(tail: list[Form], macros: MacroRegistry, render_fn: RenderFn) -> Fragment | None:
    # Library names are emitted verbatim, `UnityEngine.UI` keeps its dots
    match tail:
        case [Word(lib)]:
            return t.import_statement(lib)
    return None
