"""Form dispatcher and list compiler.

`render_form` classifies a form by its tag and renders it. Lists go to
`render_list`, which tries, in order:

1. the special form named by the head word (SPECIAL_FORMS),
2. the structural shapes: method call, field access, infix, keyword lookup,
3. a registered macro named by a bare head word,
4. an ordinary function call.

Nothing here raises on a shape it does not know; an unmatched form renders
as an inline diagnostic comment and its siblings render normally.
"""

from __future__ import annotations

from unity_lisp import Form, Fragment
from unity_lisp.debug_utils.pprint import comment_safe, pprint_form
from unity_lisp.rendering import templates as t
from unity_lisp.rendering.bridge import SUGAR_ARG, render_args, sugar_lambda
from unity_lisp.rendering.naming import (
    infix_function, render_hint, render_keyword, render_number, render_string, render_word,
)
from unity_lisp.rendering.special_forms import SPECIAL_FORMS, YIELD
from unity_lisp.types.forms import (
    Accessor, Hint, InfixOperator, Keyword, KeywordFn, ListForm, MapForm, Method,
    Number, PercentArg, String, SugarLambda, VectorForm, Word, Yield,
)
from unity_lisp.types.macro_registry import MacroDefinition, MacroRegistry


def _failed(kind: str, form: Form) -> Fragment:
    return t.diagnostic(f"Failed to match {kind} {comment_safe(pprint_form(form))}")


def render_form(form: Form, macros: MacroRegistry) -> Fragment:
    def render(f: Form) -> Fragment:
        return render_form(f, macros)

    match form:
        case Word(name):
            return render_word(name)
        case Hint():
            if form.type_name is None:
                return _failed("hint (^)", form)
            return render_hint(form.type_name, form.bound_name)
        case Number(literal):
            return render_number(literal)
        case String(text):
            return render_string(text)
        case VectorForm(items):
            return t.vector([render(x) for x in items])
        case ListForm(items):
            return render_list(items, macros)
        case MapForm(items):
            return render_map(form, macros)
        case InfixOperator(symbol):
            fn = infix_function(symbol)
            return fn if fn is not None else _failed("operator", form)
        case SugarLambda(body):
            return sugar_lambda(body, render)
        case PercentArg():
            return SUGAR_ARG
        case Accessor(field_name):
            return t.attribute_accessor_fn(field_name)
        case Keyword(name):
            return render_keyword(name)
        case KeywordFn(target):
            return t.keyword_fn(render(target))
        case Method(method_name):
            return t.lone_method_call(method_name)
    return _failed("form", form)


def render_map(form: MapForm, macros: MacroRegistry) -> Fragment:
    # Items are rendered first, then paired up as key: value
    rendered = [render_form(x, macros) for x in form.items]
    if len(rendered) % 2:
        return t.diagnostic(
            f"Map literal needs an even number of forms, got {len(rendered)}: {comment_safe(pprint_form(form))}"
        )
    return t.map_literal(list(zip(rendered[::2], rendered[1::2])))


def render_list(items: tuple, macros: MacroRegistry) -> Fragment:
    def render(f: Form) -> Fragment:
        return render_form(f, macros)

    if not items:
        return _failed("list", ListForm(items))

    head, *tail = items

    # Special forms (first match wins, a wrong shape falls through)
    key = head.name if isinstance(head, Word) else YIELD if isinstance(head, Yield) else None
    if key in SPECIAL_FORMS:
        result = SPECIAL_FORMS[key](tail, macros, render)
        if result is not None:
            return result

    match items:
        case (Method(method_name), obj, *args):
            return t.method_call(method_name, render(obj), render_args(args, render))
        case (Accessor(field_name), obj):
            return t.access(field_name, render(obj))
        case (InfixOperator(op), a, b):
            return t.infix(op, render(a), render(b))
        case (Keyword(name), obj):
            return t.keyword_access(name, render(obj))

    if isinstance(head, Word):
        macro = macros.lookup(head.name)
        if macro is not None:
            return expand_macro(head.name, macro, macros)

    return t.fn_call(render(head), render_args(tail, render))


def expand_macro(name: str, macro: MacroDefinition, macros: MacroRegistry) -> Fragment:
    """Render the stored body in place of the call; call-site arguments are ignored."""
    if name in macros.active:
        return t.diagnostic(f"Recursive expansion of macro {name}")
    macros.active.add(name)
    try:
        return render_form(macro.body, macros)
    finally:
        macros.active.discard(name)
