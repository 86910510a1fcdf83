"""Special forms: defn, defmethod, defvoid.

    (defn name [args] body...)       -> static function name(args) : Object
    (defmethod name [args] body...)  -> function name(args) : Object
    (defvoid name [args] body...)    -> function name(args) : Object, no implicit return

A yield anywhere in the body makes the return type IEnumerator and drops the
implicit return, whatever the form.
"""

from __future__ import annotations

from typing import Callable

from unity_lisp import Form, Fragment, RenderFn
from unity_lisp.rendering import templates as t
from unity_lisp.rendering.bridge import function_shape, render_args, render_body
from unity_lisp.types.forms import VectorForm, Word
from unity_lisp.types.macro_registry import MacroRegistry


def _named_fn(
    tail: list[Form],
    render_fn: RenderFn,
    template: Callable[[str, str, str, str], Fragment],
    force_void: bool = False,
) -> Fragment | None:
    match tail:
        case [Word(fn_name), VectorForm(args), *body]:
            return_type, is_void = function_shape(body, force_void)
            return template(fn_name, return_type, render_args(args, render_fn), render_body(body, render_fn, is_void))
    return None


def defn_form(tail: list[Form], macros: MacroRegistry, render_fn: RenderFn) -> Fragment | None:
    return _named_fn(tail, render_fn, t.static_named_fn_def)


def defmethod_form(tail: list[Form], macros: MacroRegistry, render_fn: RenderFn) -> Fragment | None:
    return _named_fn(tail, render_fn, t.method_def)


def defvoid_form(tail: list[Form], macros: MacroRegistry, render_fn: RenderFn) -> Fragment | None:
    return _named_fn(tail, render_fn, t.method_def, force_void=True)
