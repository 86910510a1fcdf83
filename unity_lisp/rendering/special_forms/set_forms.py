from __future__ import annotations

from unity_lisp import Form, Fragment, RenderFn
from unity_lisp.rendering import templates as t
from unity_lisp.types.macro_registry import MacroRegistry


def set_form(tail: list[Form], macros: MacroRegistry, render_fn: RenderFn) -> Fragment | None:
    """(set! target value) -> target = value"""
    if len(tail) != 2:
        return None
    target, value = tail
    return t.assign(render_fn(target), render_fn(value))


def update_form(tail: list[Form], macros: MacroRegistry, render_fn: RenderFn) -> Fragment | None:
    """(update! target f) -> target = f(target)"""
    if len(tail) != 2:
        return None
    target, f = tail
    return t.update_statement(render_fn(target), render_fn(f))
