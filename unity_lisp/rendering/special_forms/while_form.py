from __future__ import annotations

from unity_lisp import Form, Fragment, RenderFn
from unity_lisp.rendering import templates as t
from unity_lisp.rendering.bridge import render_body
from unity_lisp.types.macro_registry import MacroRegistry


def while_form(tail: list[Form], macros: MacroRegistry, render_fn: RenderFn) -> Fragment | None:
    """(while cond body...) -> while loop wrapped as an expression evaluating to null."""
    if not tail:
        return None
    cond, *body = tail
    return t.while_statement(render_fn(cond), render_body(body, render_fn, True))
