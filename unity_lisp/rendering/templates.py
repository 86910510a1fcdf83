"""Target-language text templates.

Every function here takes already-rendered fragments (or raw names) and
returns a fragment. Nothing in this module recurses into forms.
"""

from __future__ import annotations

from unity_lisp import Fragment
from unity_lisp.rendering.naming import js_naming

OBJECT_TYPE = "Object"
ENUMERATOR_TYPE = "IEnumerator"

INDENT = "\t"


def _lines(code: str) -> list[str]:
    # Trailing empty lines are dropped, but a lone empty string stays one line
    lines = code.split("\n")
    if len(lines) == 1:
        return lines
    while lines and lines[-1] == "":
        lines.pop()
    return lines


def with_indent(code: str) -> str:
    """Prefix every line of `code` with one indentation level; every line ends with a newline."""
    return "".join(f"{INDENT}{line}\n" for line in _lines(code))


def statement(code: str) -> str:
    return with_indent(code + ";")


def assign(target: str, code: str) -> Fragment:
    return f"{target} = {code}"


def define(name: str, code: str | None = None) -> Fragment:
    if code is None:
        return f"var {name}"
    return f"var {name} = {code}"


def define_static(name: str, code: str | None = None) -> Fragment:
    return "static " + define(name, code)


def infix(op: str, a: str, b: str) -> Fragment:
    return f"({a} {op} {b})"


def fn_call(f: str, args: str) -> Fragment:
    return f"{f}({args})"


def method_call(method_name: str, obj: str, args: str) -> Fragment:
    return f"{obj}.{js_naming(method_name)}({args})"


def fn_def(return_type: str, arglist: str, body: str) -> Fragment:
    return f"function({arglist}) : {return_type} {{\n{body}}}"


def method_def(fn_name: str, return_type: str, arglist: str, body: str) -> Fragment:
    return f"function {js_naming(fn_name)}({arglist}) : {return_type} {{\n{body}}}"


def static_named_fn_def(fn_name: str, return_type: str, arglist: str, body: str) -> Fragment:
    return "static " + method_def(fn_name, return_type, arglist, body)


def return_(code: str) -> Fragment:
    return f"return {code}"


def if_expression(conditional: str, body: str, else_body: str) -> Fragment:
    return f"({conditional} ? {body} : {else_body})"


def wrap_in_function(code: str) -> Fragment:
    """Immediately-invoked wrapper for side-effect statements; evaluates to null."""
    return f"function() {{\n{with_indent(code)}{INDENT}return null;\n}}()"


def do_if_statement(conditional: str, body: str, else_body: str) -> Fragment:
    return wrap_in_function(f"if({conditional}) {{\n{body}}} else {{\n{else_body}}}")


def while_statement(check: str, body: str) -> Fragment:
    return wrap_in_function(f"while({check}) {{\n{body}}}")


def let_statement(bindings: str, body: str) -> Fragment:
    return f"function() : {OBJECT_TYPE} {{/*let*/\n{bindings}{body}}}()"


def do_statement(body: str) -> Fragment:
    return f"function() : {OBJECT_TYPE} {{/*do*/\n{body}}}()"


def new_statement(type_name: str, arglist: str) -> Fragment:
    return f"new {type_name}({arglist})"


def nth_statement(seq: str, index: str) -> Fragment:
    return f"{seq}[{index}]"


def not_expression(code: str) -> Fragment:
    return f"!({code})"


def yield_statement(code: str | None = None) -> Fragment:
    return "yield" if code is None else f"yield {code}"


def import_statement(lib: str) -> Fragment:
    return f"import {lib}"


def access(attr: str, obj: str) -> Fragment:
    return f"{obj}.{js_naming(attr)}"


def attribute_accessor_fn(attribute: str) -> Fragment:
    return f"function(__OBJ__) {{ return __OBJ__.{js_naming(attribute)}; }}"


def keyword_access(keyword_name: str, obj: str) -> Fragment:
    return f'{obj}["{keyword_name}"]'


def keyword_fn(key: str) -> Fragment:
    return f"function(__MAP__) {{ return __MAP__[{key}]; }}"


def lone_method_call(method_name: str) -> Fragment:
    return f"function(__OBJ__) {{ return __OBJ__.{js_naming(method_name)}(); }}"


def deftype_statement(class_name: str, members: str, body: str) -> Fragment:
    return f"public class {class_name} {{\n{members}{body}}}"


def update_statement(obj: str, f: str) -> Fragment:
    return f"{obj} = {f}({obj})"


def vector(items: list[str]) -> Fragment:
    return "[" + ", ".join(items) + "]"


def map_literal(pairs: list[tuple[str, str]]) -> Fragment:
    return "{" + ", ".join(f"{k}: {v}" for k, v in pairs) + "}"


def diagnostic(message: str) -> Fragment:
    return f" /* {message} */ "
