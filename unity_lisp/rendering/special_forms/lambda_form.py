from __future__ import annotations

from unity_lisp import Form, Fragment, RenderFn
from unity_lisp.rendering import templates as t
from unity_lisp.rendering.bridge import function_shape, render_args, render_body
from unity_lisp.types.forms import VectorForm
from unity_lisp.types.macro_registry import MacroRegistry


def lambda_form(tail: list[Form], macros: MacroRegistry, render_fn: RenderFn) -> Fragment | None:
    """(fn [args...] body...) -> anonymous function"""
    match tail:
        case [VectorForm(args), *body]:
            return_type, is_void = function_shape(body)
            return t.fn_def(return_type, render_args(args, render_fn), render_body(body, render_fn, is_void))
    return None
