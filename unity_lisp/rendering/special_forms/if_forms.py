from __future__ import annotations

from unity_lisp import Form, Fragment, RenderFn
from unity_lisp.rendering import templates as t
from unity_lisp.types.macro_registry import MacroRegistry


def if_form(tail: list[Form], macros: MacroRegistry, render_fn: RenderFn) -> Fragment | None:
    """(if cond then else) -> (cond ? then : else)"""
    if len(tail) != 3:
        return None
    cond, then, else_ = tail
    return t.if_expression(render_fn(cond), render_fn(then), render_fn(else_))


def do_if_form(tail: list[Form], macros: MacroRegistry, render_fn: RenderFn) -> Fragment | None:
    """(do-if cond then [else]) -> if statement run for side effects, evaluates to null."""
    if len(tail) not in (2, 3):
        return None
    cond, then, *else_ = tail
    cond_code = render_fn(cond)
    then_code = t.statement(render_fn(then))
    else_code = t.statement(render_fn(else_[0])) if else_ else ""
    return t.do_if_statement(cond_code, then_code, else_code)
