import pytest

from unity_lisp.translator import Translator


@pytest.fixture
def translator():
    """A fresh translation session with the builtin macros installed."""
    return Translator()


@pytest.fixture
def js(translator):
    """Translate a snippet with the session from the `translator` fixture."""
    return translator.translate


@pytest.fixture(autouse=True)
def _default_config(monkeypatch):
    # Tests must not depend on the caller's environment
    for var in (
        "UNITY_LISP_OUT_DIR",
        "UNITY_LISP_EXTENSIONS",
        "UNITY_LISP_TARGET_EXTENSION",
        "UNITY_LISP_HEADER",
        "UNITY_LISP_POLL_INTERVAL",
    ):
        monkeypatch.delenv(var, raising=False)
