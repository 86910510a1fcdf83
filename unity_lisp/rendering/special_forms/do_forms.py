"""Special forms: do, let.

Both must be usable wherever an expression is legal, so they render as
immediately-invoked zero-argument functions returning their last form.
"""

from __future__ import annotations

from unity_lisp import Form, Fragment, RenderFn
from unity_lisp.debug_utils.pprint import comment_safe, pprint_form
from unity_lisp.rendering import templates as t
from unity_lisp.rendering.bridge import render_body
from unity_lisp.rendering.naming import js_naming
from unity_lisp.types.forms import Hint, VectorForm, Word
from unity_lisp.types.macro_registry import MacroRegistry


def do_form(tail: list[Form], macros: MacroRegistry, render_fn: RenderFn) -> Fragment | None:
    return t.do_statement(render_body(tail, render_fn, False))


def _render_binding(pair: tuple, render_fn: RenderFn) -> Fragment:
    match pair:
        case (Word(name), value):
            return t.define(js_naming(name), render_fn(value))
        case (Hint() as hint, value):
            return t.define(render_fn(hint), render_fn(value))
    text = " ".join(pprint_form(f) for f in pair)
    return t.diagnostic(f"Failed to match binding [{comment_safe(text)}]")


def render_bindings(bindings: tuple, render_fn: RenderFn) -> Fragment:
    # A dangling name without a value is reported in place
    pairs = [bindings[i:i + 2] for i in range(0, len(bindings), 2)]
    return "".join(t.statement(_render_binding(p, render_fn)) for p in pairs)


def let_form(tail: list[Form], macros: MacroRegistry, render_fn: RenderFn) -> Fragment | None:
    match tail:
        case [VectorForm(bindings), *body]:
            return t.let_statement(render_bindings(bindings, render_fn), render_body(body, render_fn, False))
    return None
