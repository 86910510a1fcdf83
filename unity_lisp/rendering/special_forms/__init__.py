"""Registry of special forms for the list compiler.

Maps head words to handler functions `(tail, macros, render_fn)`. A handler
returns the rendered fragment, or None when the list does not have the shape
the form requires; the list then falls through to the structural patterns
and finally to an ordinary (or macro) call.
"""

from unity_lisp.rendering.special_forms.define_forms import def_form, def_static_form
from unity_lisp.rendering.special_forms.set_forms import set_form, update_form
from unity_lisp.rendering.special_forms.import_form import import_form
from unity_lisp.rendering.special_forms.expression_forms import not_form, nth_form, new_form, yield_form
from unity_lisp.rendering.special_forms.do_forms import do_form, let_form
from unity_lisp.rendering.special_forms.deftype_form import deftype_form
from unity_lisp.rendering.special_forms.lambda_form import lambda_form
from unity_lisp.rendering.special_forms.defn_forms import defn_form, defmethod_form, defvoid_form
from unity_lisp.rendering.special_forms.defmacro_form import defmacro_form
from unity_lisp.rendering.special_forms.if_forms import if_form, do_if_form
from unity_lisp.rendering.special_forms.while_form import while_form

# `yield` is its own token rather than a word; the dispatcher looks it up by this name.
YIELD = "yield"

SPECIAL_FORMS = {
    "def": def_form,
    "def-static": def_static_form,
    "set!": set_form,
    "import": import_form,
    "not": not_form,
    YIELD: yield_form,
    "update!": update_form,
    "nth": nth_form,
    "new": new_form,
    "do": do_form,
    "let": let_form,
    "deftype": deftype_form,
    "fn": lambda_form,
    "defn": defn_form,
    "defmethod": defmethod_form,
    "defvoid": defvoid_form,
    "defmacro": defmacro_form,
    "if": if_form,
    "do-if": do_if_form,
    "while": while_form,
}
