"""Builtin macros installed into every new translation session."""

from unity_lisp.types.forms import Number
from unity_lisp.types.macro_registry import MacroRegistry

DEFAULT_MACROS = {
    "PI": ((), Number("42")),
}


def register(macros: MacroRegistry) -> None:
    for name, (params, body) in DEFAULT_MACROS.items():
        macros.register(name, params, body)
