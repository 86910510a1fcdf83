import pytest

from unity_lisp.rendering.bridge import function_shape
from unity_lisp.types.forms import ListForm, Number, SugarLambda, VectorForm, Word, Yield, contains
from unity_lisp.reader.parser import read_program


def _body(source):
    return read_program(source)


@pytest.mark.parametrize(
    "source,expected",
    [
        ("(f) 1", ("Object", False)),
        ("(yield 1)", ("IEnumerator", True)),
        ("(if a (yield 1) 2)", ("IEnumerator", True)),
        ("(let [a (do (do-if b (yield a)))] a)", ("IEnumerator", True)),
        ("[1 (yield)]", ("IEnumerator", True)),
        ("#(yield %)", ("IEnumerator", True)),
        ("(yielder 1)", ("Object", False)),
    ]
)
def test_function_shape(source, expected):
    assert function_shape(_body(source)) == expected


def test_force_void_without_yield():
    assert function_shape(_body("(f)"), force_void=True) == ("Object", True)


def test_contains_searches_every_depth():
    deep = ListForm((Word("a"), VectorForm((ListForm((SugarLambda(ListForm((Yield(),))),)),))))
    assert contains([deep], Yield)
    assert not contains([ListForm((Word("a"), Number("1")))], Yield)


def test_nested_yield_makes_an_enumerator(js):
    assert js("(defn f [] (if a (yield 1) 2))") == "static function f() : IEnumerator {\n\t(a ? yield 1 : 2);\n};"


def test_yield_inside_do_if(js):
    assert js("(defmethod tick [] (do-if ready? (yield 1)) done)") == (
        "function tick() : IEnumerator {\n"
        "\tfunction() {\n"
        "\t\tif(isReady) {\n"
        "\t\t\tyield 1;\n"
        "\t\t} else {\n"
        "\t\t}\n"
        "\t\treturn null;\n"
        "\t}();\n"
        "\tdone;\n"
        "};"
    )


def test_coroutine_body_has_no_implicit_return(js):
    out = js("(defn spawn [] (yield (wait 1)) (make))")
    assert out == "static function spawn() : IEnumerator {\n\tyield wait(1);\n\tmake();\n};"


def test_defvoid_with_yield_is_an_enumerator(js):
    assert js("(defvoid Run [] (yield 1))") == "function Run() : IEnumerator {\n\tyield 1;\n};"


def test_anonymous_coroutine(js):
    assert js("(fn [] (yield 1) 2)") == "function() : IEnumerator {\n\tyield 1;\n\t2;\n};"
