import pytest
from hypothesis import given, settings, strategies as st

from unity_lisp.rendering.naming import js_naming
from unity_lisp.translator import Translator, lisp_to_js
from unity_lisp.types.forms import ListForm, Word


def test_empty_program(js):
    assert js("") == ""
    assert js("  ; nothing but a comment\n") == ""


def test_top_level_forms_joined_by_blank_lines(js):
    assert js("(def x 5)\n(def y 6)") == "var x = 5;\n\nvar y = 6;"


def test_scenario(js):
    assert js("(def x 5)") == "var x = 5;"
    assert js("(defn add? [a b] (+ a b))") == "static function isAdd(a, b) : Object {\n\treturn (a + b);\n};"


def test_parse_failure_becomes_comment(js):
    assert js("(def x") == "/*\nParse error at line 1, column 7:\n(def x\n      ^\nExpected ')' to close '('\n*/"


def test_parse_failure_cannot_close_its_comment(js):
    out = js("(f */)")
    assert out == "/*\nParse error at line 1, column 4:\n(f * /)\n   ^\nUnexpected character '*'\n*/"
    assert out.count("*/") == 1


def test_deeply_nested_source_is_a_parse_failure(js):
    out = js("(f " * 5000 + "x" + ")" * 5000)
    assert out.startswith("/*\nParse error at line 1")
    assert out.endswith("Forms nested too deeply\n*/")


def test_deeply_nested_form_renders_a_diagnostic(translator):
    form = Word("x")
    for _ in range(5000):
        form = ListForm((Word("f"), form))
    assert translator.translate_form(form) == " /* Form nested too deeply to render */ "
    assert translator.translate("(f 1)") == "f(1);"


def test_parse_failure_is_whole_program(js):
    out = js("(def a 1)\n(def b")
    assert out.startswith("/*\n")
    assert "var a" not in out


def test_unmatched_form_does_not_stop_siblings(js):
    out = js("(def a 1)\n()\n(def b 2)")
    assert out.split("\n\n") == ["var a = 1;", " /* Failed to match list () */ ;", "var b = 2;"]


def test_lisp_to_js():
    assert lisp_to_js("(f 1)") == "f(1);"


def test_lisp_to_js_with_session():
    session = Translator()
    lisp_to_js("(defmacro one [] 1)", session)
    assert lisp_to_js("(one)", session) == "1;"
    assert lisp_to_js("(one)") == "one();"


def test_small_program(js):
    source = """
(import UnityEngine)

; a spinning cube
(def-static ^float speed 2.5)

(defvoid Update []
  (.Rotate transform 0 (* speed (.-deltaTime Time)) 0))
"""
    assert js(source) == (
        "import UnityEngine;\n\n"
        "static var speed : float = 2.5;\n\n"
        "function Update() : Object {\n"
        "\ttransform.Rotate(0, (speed * Time.deltaTime), 0);\n"
        "};"
    )


# -------------------------
# Properties
# -------------------------

OPS = ["+", "-", "*", "/", "==", "!=", "<", ">", "<=", ">=", "is", "as", "and"]
RESERVED = {"nil", "yield", "is", "as", "and"}

names = st.from_regex(r"[a-z][a-z0-9-]{0,8}\??", fullmatch=True).filter(lambda s: s not in RESERVED)
leaves = st.one_of(
    names.map(lambda n: (n, js_naming(n))),
    st.integers(-1000, 1000).map(lambda n: (str(n), str(n))),
)


def _infix(children):
    return st.tuples(st.sampled_from(OPS), children, children).map(
        lambda t: (f"({t[0]} {t[1][0]} {t[2][0]})", f"({t[1][1]} {t[0]} {t[2][1]})")
    )


infix_exprs = st.recursive(leaves, _infix, max_leaves=12)


@given(infix_exprs)
def test_infix_renders_recursively(expr):
    source, expected = expr
    assert Translator().translate(source) == expected + ";"


def _call(children):
    return st.tuples(names, st.lists(children, max_size=4)).map(
        lambda t: "(" + " ".join([t[0], *t[1]]) + ")"
    )


programs = st.lists(st.recursive(leaves.map(lambda leaf: leaf[0]), _call, max_leaves=15), max_size=6).map("\n".join)


@settings(max_examples=50)
@given(programs)
def test_translation_is_deterministic(source):
    assert Translator().translate(source) == Translator().translate(source)


@given(st.lists(names, min_size=1, max_size=5), st.integers(0, 4))
def test_unmatched_form_keeps_fragment_count(words, k):
    forms = [f"(def {w} 1)" for w in words]
    k = min(k, len(forms))
    forms.insert(k, "()")
    out = Translator().translate("\n".join(forms))
    fragments = out.split("\n\n")
    assert len(fragments) == len(forms)
    assert fragments[k] == " /* Failed to match list () */ ;"
