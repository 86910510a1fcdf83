"""Special forms that map one-to-one onto a target expression: not, nth, new, yield."""

from __future__ import annotations

from unity_lisp import Form, Fragment, RenderFn
from unity_lisp.rendering import templates as t
from unity_lisp.rendering.bridge import render_args
from unity_lisp.types.forms import Word
from unity_lisp.types.macro_registry import MacroRegistry


def not_form(tail: list[Form], macros: MacroRegistry, render_fn: RenderFn) -> Fragment | None:
    if len(tail) != 1:
        return None
    return t.not_expression(render_fn(tail[0]))


def nth_form(tail: list[Form], macros: MacroRegistry, render_fn: RenderFn) -> Fragment | None:
    if len(tail) != 2:
        return None
    seq, index = tail
    return t.nth_statement(render_fn(seq), render_fn(index))


def new_form(tail: list[Form], macros: MacroRegistry, render_fn: RenderFn) -> Fragment | None:
    match tail:
        case [Word(type_name), *args]:
            return t.new_statement(type_name, render_args(args, render_fn))
    return None


def yield_form(tail: list[Form], macros: MacroRegistry, render_fn: RenderFn) -> Fragment | None:
    # A bare (yield) suspends for one frame
    if not tail:
        return t.yield_statement()
    if len(tail) != 1:
        return None
    return t.yield_statement(render_fn(tail[0]))
