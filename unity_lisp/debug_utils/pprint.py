"""Source-like printing of Forms.

Used to embed a form that failed to match inside a diagnostic comment, and
handy when debugging the reader from a REPL.
"""

from unity_lisp.types.forms import (
    Accessor, Hint, InfixOperator, Keyword, KeywordFn, ListForm, MapForm, Method,
    Number, PercentArg, String, SugarLambda, VectorForm, Word, Yield,
)


def pprint_form(form) -> str:
    match form:
        case Word(name):
            return name
        case Number(literal):
            return literal
        case String(text):
            return f'"{text}"'
        case Keyword(name):
            return f":{name}"
        case InfixOperator(symbol):
            return symbol
        case Accessor(field_name):
            return f".-{field_name}"
        case Method(method_name):
            return f".{method_name}"
        case Hint(parts):
            return "^" + " ".join(pprint_form(p) for p in parts)
        case Yield():
            return "yield"
        case PercentArg():
            return "%"
        case SugarLambda(body):
            return "#" + pprint_form(body)
        case KeywordFn(target):
            return "λ" + pprint_form(target)
        case ListForm(items):
            return "(" + " ".join(pprint_form(x) for x in items) + ")"
        case VectorForm(items):
            return "[" + " ".join(pprint_form(x) for x in items) + "]"
        case MapForm(items):
            return "{" + " ".join(pprint_form(x) for x in items) + "}"
    return repr(form)


def comment_safe(text: str) -> str:
    """Break up any `*/` so the text can sit inside a block comment."""
    return text.replace("*/", "* /")
