from __future__ import annotations

import logging

from unity_lisp import Form, Fragment
from unity_lisp.builtin.macro_builtin import register as register_macros
from unity_lisp.debug_utils.pprint import comment_safe
from unity_lisp.reader.parser import ParseFailure, parse
from unity_lisp.rendering.dispatcher import render_form
from unity_lisp.rendering.templates import diagnostic
from unity_lisp.types.macro_registry import MacroRegistry

logger = logging.getLogger(__name__)


def failure_comment(failure: ParseFailure) -> str:
    return f"/*\n{comment_safe(str(failure))}\n*/"


class Translator:
    """
    A translation session: parses Lisp source and renders it as UnityScript.
    Maintains one MacroRegistry across calls, so macros defined while
    translating one file are visible to every later file in the same run.
    """

    def __init__(self, macros: MacroRegistry | None = None, defaults: bool = True):
        self.macros: MacroRegistry = macros if macros is not None else MacroRegistry()
        if defaults:
            register_macros(self.macros)

    def reset_macros(self, defaults: bool = True) -> None:
        self.macros.clear()
        if defaults:
            register_macros(self.macros)

    def translate_form(self, form: Form) -> Fragment:
        try:
            return render_form(form, self.macros)
        except RecursionError:
            logger.debug("render of a %s exceeded the recursion limit", type(form).__name__)
            return diagnostic("Form nested too deeply to render")

    def translate(self, code: str) -> str:
        """Translate a whole program; a parse failure becomes the output, wrapped as a comment."""
        tree = parse(code)
        if isinstance(tree, ParseFailure):
            logger.debug("parse failed at %d:%d: %s", tree.line, tree.column, tree.message)
            return failure_comment(tree)
        return "\n\n".join(self.translate_form(form) + ";" for form in tree)


def lisp_to_js(code: str, translator: Translator | None = None) -> str:
    """Convert lisp to js (string -> string)"""
    if translator is None:
        translator = Translator()
    return translator.translate(code)
