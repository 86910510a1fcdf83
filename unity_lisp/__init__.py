# Core type aliases for the translator's data model.
#
# Naming guidance:
# - Form:      a parsed syntactic unit, the tagged union in unity_lisp.types.forms.
# - Fragment:  rendered target-language text. Rendering is pure text
#              composition; no structured model of the output is kept.

from typing import Callable

Fragment = str

# Form lives with its variants; Fragment must exist before this import runs.
from unity_lisp.types.forms import Form  # noqa: E402

# Renderer function type: passed into special-form handlers so they can
# recurse into sub-forms.
RenderFn = Callable[[Form], Fragment]
