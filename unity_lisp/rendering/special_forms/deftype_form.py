"""Special form: deftype.

    (deftype Name [members...] body...)

Members become field declarations ahead of the body; the body (usually
defmethod/defvoid forms) is rendered statement by statement.
"""

from __future__ import annotations

from unity_lisp import Form, Fragment, RenderFn
from unity_lisp.rendering import templates as t
from unity_lisp.rendering.bridge import render_statements
from unity_lisp.rendering.naming import js_naming
from unity_lisp.types.forms import Hint, VectorForm, Word
from unity_lisp.types.macro_registry import MacroRegistry


def _member(member: Form, render_fn: RenderFn) -> Fragment:
    if isinstance(member, Word):
        return t.define(js_naming(member.name))
    if isinstance(member, Hint):
        return t.define(render_fn(member))
    return render_fn(member)


def deftype_form(tail: list[Form], macros: MacroRegistry, render_fn: RenderFn) -> Fragment | None:
    match tail:
        case [Word(class_name), VectorForm(members), *body]:
            member_code = "".join(t.statement(_member(m, render_fn)) for m in members)
            return t.deftype_statement(class_name, member_code, render_statements(body, render_fn))
    return None
