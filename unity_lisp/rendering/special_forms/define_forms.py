"""Special forms: def, def-static.

    (def name value)          -> var name = value
    (def ^Type name value)    -> var name : Type = value
    (def ^Type name)          -> var name : Type
    (def name)                -> diagnostic, a type hint is required

Any other shape falls through to an ordinary call.
"""

from __future__ import annotations

from typing import Callable

from unity_lisp import Form, Fragment, RenderFn
from unity_lisp.rendering import templates as t
from unity_lisp.rendering.naming import js_naming
from unity_lisp.types.forms import Hint, Word
from unity_lisp.types.macro_registry import MacroRegistry


def _declare(tail: list[Form], render_fn: RenderFn, declare: Callable[..., Fragment]) -> Fragment | None:
    match tail:
        case [Word(name), value]:
            return declare(js_naming(name), render_fn(value))
        case [Hint() as hint, value]:
            return declare(render_fn(hint), render_fn(value))
        case [Hint() as hint]:
            return declare(render_fn(hint))
        case [Word(name)]:
            return t.diagnostic(f"Must use type hints when not assigning var '{name}' at definition")
    return None


def def_form(tail: list[Form], macros: MacroRegistry, render_fn: RenderFn) -> Fragment | None:
    return _declare(tail, render_fn, t.define)


def def_static_form(tail: list[Form], macros: MacroRegistry, render_fn: RenderFn) -> Fragment | None:
    return _declare(tail, render_fn, t.define_static)
