"""Statement/expression bridge.

The source language is expression oriented; the target is statement
oriented. Bodies become indented statement sequences whose last statement is
returned, unless the function is in void mode. A `yield` anywhere in a body
(at any depth) switches the function to the enumerator return type and void
mode: yield sites, not a return value, are its output.
"""

from __future__ import annotations

from typing import Sequence

from unity_lisp import Form, Fragment, RenderFn
from unity_lisp.rendering import templates as t
from unity_lisp.rendering.naming import NULL
from unity_lisp.types.forms import PercentArg, Yield, contains

SUGAR_ARG = "__ARG__"


def render_args(args: Sequence[Form], render_fn: RenderFn) -> Fragment:
    return ", ".join(render_fn(a) for a in args)


def render_body(body: Sequence[Form], render_fn: RenderFn, is_void: bool) -> Fragment:
    if not body:
        return "" if is_void else t.statement(t.return_(NULL))
    *init, last = body
    out = [t.statement(render_fn(f)) for f in init]
    last_code = render_fn(last)
    out.append(t.statement(last_code if is_void else t.return_(last_code)))
    return "".join(out)


def render_statements(body: Sequence[Form], render_fn: RenderFn) -> Fragment:
    """Every form as a statement, nothing returned (class bodies, branches)."""
    return "".join(t.statement(render_fn(f)) for f in body)


def function_shape(body: Sequence[Form], force_void: bool = False) -> tuple[str, bool]:
    """(return type, is_void) for a function whose body is `body`."""
    if contains(body, Yield):
        return t.ENUMERATOR_TYPE, True
    return t.OBJECT_TYPE, force_void


def sugar_lambda(body: Form, render_fn: RenderFn) -> Fragment:
    # One conventional parameter iff `%` occurs anywhere in the body
    arglist = SUGAR_ARG if contains([body], PercentArg) else ""
    return t.fn_def(t.OBJECT_TYPE, arglist, render_body([body], render_fn, False))
