import pytest

from unity_lisp.translator import Translator
from unity_lisp.types.forms import ListForm, Number, Word
from unity_lisp.types.macro_registry import MacroDefinition, MacroRegistry


# -------------------------
# Registry
# -------------------------

def test_register_returns_placeholder():
    macros = MacroRegistry()
    assert macros.register("greet", ["x"], Number("1")) == "/* Defined macro greet */ "
    assert macros.lookup("greet") == MacroDefinition(("x",), Number("1"))
    assert "greet" in macros


def test_register_overwrites():
    macros = MacroRegistry()
    macros.register("m", [], Number("1"))
    macros.register("m", [], Number("2"))
    assert macros.lookup("m").body == Number("2")
    assert len(macros) == 1


def test_lookup_missing():
    assert MacroRegistry().lookup("nope") is None


def test_defmacro_records_parameter_names(translator):
    translator.translate("(defmacro m [x y] x)")
    assert translator.macros.lookup("m").params == ("x", "y")


# -------------------------
# Expansion
# -------------------------

def test_call_site_arguments_are_ignored(js):
    source = '(defmacro greet [] (.Log Debug "hi"))\n(greet)\n(greet 1 2 3)'
    assert js(source) == '/* Defined macro greet */ ;\n\nDebug.Log("hi");\n\nDebug.Log("hi");'


def test_parameters_are_not_bound(js):
    # `x` in the body stays `x`, whatever was passed
    assert js("(defmacro twice [x] (* x 2))\n(twice 21)") == "/* Defined macro twice */ ;\n\n(x * 2);"


def test_builtin_pi(js):
    assert js("(PI)") == "42;"
    assert js("(PI 1 2)") == "42;"


def test_macro_only_expands_in_call_position(js):
    assert js("PI") == "PI;"


def test_unregistered_name_is_a_plain_call(js):
    assert js("(greet 1)") == "greet(1);"


def test_special_forms_win_over_macros(js):
    js("(defmacro def [] 1)")
    assert js("(def x 5)") == "var x = 5;"


def test_macro_body_can_use_other_macros(js):
    assert js("(defmacro tau [] (* 2 (PI)))\n(tau)") == "/* Defined macro tau */ ;\n\n(2 * 42);"


def test_macro_with_wrong_shape_is_a_call(js):
    # defmacro takes exactly one body form
    assert js("(defmacro m [] 1 2)") == "defmacro(m, [], 1, 2);"


def test_recursive_macro_is_reported(js):
    out = js("(defmacro forever [] (forever))\n(forever)")
    assert out == "/* Defined macro forever */ ;\n\n /* Recursive expansion of macro forever */ ;"


def test_expansion_state_is_restored(translator):
    translator.translate("(defmacro again [] (again))")
    translator.translate("(again)")
    assert translator.macros.active == set()


# -------------------------
# Session lifetime
# -------------------------

def test_macros_persist_across_translations(translator):
    translator.translate("(defmacro hello [] (say 1))")
    assert translator.translate("(hello)") == "say(1);"


def test_sessions_are_independent(translator):
    translator.translate("(defmacro hello [] (say 1))")
    assert Translator().translate("(hello)") == "hello();"


def test_reset_macros(translator):
    translator.translate("(defmacro hello [] (say 1))")
    translator.reset_macros()
    assert translator.translate("(hello)") == "hello();"
    assert translator.translate("(PI)") == "42;"


def test_reset_without_defaults(translator):
    translator.reset_macros(defaults=False)
    assert len(translator.macros) == 0
    assert translator.translate("(PI)") == "PI();"


def test_shared_registry():
    macros = MacroRegistry()
    Translator(macros).translate("(defmacro one [] 1)")
    assert Translator(macros, defaults=False).translate("(one)") == "1;"


def test_translate_form(translator):
    form = ListForm((Word("PI"),))
    assert translator.translate_form(form) == "42"
