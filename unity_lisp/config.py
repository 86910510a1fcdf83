from __future__ import annotations
import os
from typing import Iterable, List


# Defaults
_DEFAULT_OUT_DIR = 'out'
_DEFAULT_EXTENSIONS = ['.clj', '.cljs']
_DEFAULT_TARGET_EXTENSION = '.js'
_DEFAULT_HEADER = 'import core;'
_DEFAULT_POLL_INTERVAL = 1.0


def list_from_env(var: str, defaults: Iterable[str]) -> List[str]:
    raw = os.environ.get(var)
    if not raw:
        return list(defaults)
    return [p.strip() for p in raw.split(os.pathsep) if p.strip()]


def get_out_dir() -> str:
    return os.environ.get('UNITY_LISP_OUT_DIR') or _DEFAULT_OUT_DIR


def get_extensions() -> List[str]:
    # Accept both 'clj' and '.clj'
    return [e if e.startswith('.') else '.' + e for e in list_from_env('UNITY_LISP_EXTENSIONS', _DEFAULT_EXTENSIONS)]


def get_target_extension() -> str:
    ext = os.environ.get('UNITY_LISP_TARGET_EXTENSION') or _DEFAULT_TARGET_EXTENSION
    return ext if ext.startswith('.') else '.' + ext


def get_header() -> str:
    # An explicitly empty value disables the header
    return os.environ.get('UNITY_LISP_HEADER', _DEFAULT_HEADER)


def get_poll_interval() -> float:
    raw = os.environ.get('UNITY_LISP_POLL_INTERVAL')
    if not raw:
        return _DEFAULT_POLL_INTERVAL
    try:
        return float(raw)
    except ValueError:
        raise ValueError(f"UNITY_LISP_POLL_INTERVAL must be a number of seconds, got {raw!r}") from None
