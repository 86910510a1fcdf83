"""Literal and identifier rendering.

Pure, stateless mapping from leaf forms to target text.
"""

from __future__ import annotations

from unity_lisp import Fragment

# Applied in this order, each as a global replace over the whole name.
REPLACEMENTS = (
    ("-", "_"),
    ("<", "_LT"),
    (">", "_GT"),
    ("?", "_QMARK"),
    ("!", "_BANG"),
)

# Operators used as values (e.g. passed to reduce) have no native function
# form in the target; they map to helpers from the `core` runtime module.
INFIX_FUNCTIONS = {
    "+": "_add_fn",
    "-": "_sub_fn",
    "*": "_mul_fn",
    "/": "_div_fn",
    "<": "_less_than_fn",
    ">": "_greater_than_fn",
}

NULL = "null"


def capitalize(s: str) -> str:
    # Only the first character changes: `hasKids` -> `HasKids`
    return s[:1].upper() + s[1:]


def js_naming(name: str) -> str:
    """
    Mangle a Lisp identifier into a target identifier.

    A trailing `?` on the original name turns the whole name into a predicate,
    `empty?` -> `isEmpty`; then the character replacements run over the result,
    `reset!` -> `reset_BANG`, `a-b?` -> `isA-b` -> `isA_b`.
    """
    if name.endswith("?"):
        name = "is" + capitalize(name[:-1])
    for old, new in REPLACEMENTS:
        name = name.replace(old, new)
    return name


def render_word(name: str) -> Fragment:
    if name == "nil":
        return NULL
    return js_naming(name)


def render_number(literal: str) -> Fragment:
    return literal


def render_string(text: str) -> Fragment:
    return f'"{text}"'


def render_keyword(name: str) -> Fragment:
    # A keyword used as a value is its name as a string
    return f'"{name}"'


def render_hint(type_name: str, bound_name: str) -> Fragment:
    return f"{js_naming(bound_name)} : {type_name}"


def infix_function(symbol: str) -> Fragment | None:
    return INFIX_FUNCTIONS.get(symbol)
