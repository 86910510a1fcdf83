"""Form variants produced by the reader.

One frozen dataclass per syntactic category. Composite forms keep their
children in tuples so every Form is hashable and compares structurally,
which the list compiler relies on when it pattern-matches shapes.

    word        -> Word("name")
    number      -> Number("1.5")        (literal text is kept verbatim)
    string      -> String("text")
    :kw         -> Keyword("kw")
    + - is ...  -> InfixOperator("+")
    .-field     -> Accessor("field")
    .method     -> Method("method")
    ^Type name  -> Hint((Word("Type"), Word("name")))
    yield       -> Yield()
    %           -> PercentArg()
    #( ... )    -> SugarLambda(ListForm(...))
    λtoken      -> KeywordFn(token)
    ( ... )     -> ListForm((...))
    [ ... ]     -> VectorForm((...))
    { ... }     -> MapForm((...))
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Union


@dataclass(frozen=True)
class Word:
    name: str


@dataclass(frozen=True)
class Number:
    literal: str


@dataclass(frozen=True)
class String:
    text: str


@dataclass(frozen=True)
class Keyword:
    name: str


@dataclass(frozen=True)
class InfixOperator:
    symbol: str


@dataclass(frozen=True)
class Accessor:
    field_name: str


@dataclass(frozen=True)
class Method:
    method_name: str


@dataclass(frozen=True)
class Hint:
    # Normally (Word(type), Word(bound)); anything else renders as a diagnostic.
    parts: tuple

    @property
    def type_name(self) -> str | None:
        return self.parts[0].name if self._well_formed() else None

    @property
    def bound_name(self) -> str | None:
        return self.parts[1].name if self._well_formed() else None

    def _well_formed(self) -> bool:
        return len(self.parts) == 2 and all(isinstance(p, Word) for p in self.parts)


@dataclass(frozen=True)
class Yield:
    pass


@dataclass(frozen=True)
class PercentArg:
    pass


@dataclass(frozen=True)
class SugarLambda:
    body: "Form"


@dataclass(frozen=True)
class KeywordFn:
    target: "Form"


@dataclass(frozen=True)
class ListForm:
    items: tuple = field(default_factory=tuple)


@dataclass(frozen=True)
class VectorForm:
    items: tuple = field(default_factory=tuple)


@dataclass(frozen=True)
class MapForm:
    items: tuple = field(default_factory=tuple)


Form = Union[
    Word, Number, String, Keyword, InfixOperator, Accessor, Method, Hint,
    Yield, PercentArg, SugarLambda, KeywordFn, ListForm, VectorForm, MapForm,
]

COMPOSITES = (ListForm, VectorForm, MapForm)

# A parsed program: the ordered top-level forms.
Program = list


def children(form: Form) -> tuple:
    """Direct sub-forms of `form` (empty for leaves)."""
    if isinstance(form, COMPOSITES):
        return form.items
    if isinstance(form, SugarLambda):
        return (form.body,)
    if isinstance(form, KeywordFn):
        return (form.target,)
    if isinstance(form, Hint):
        return form.parts
    return ()


def walk(form: Form) -> Iterator[Form]:
    """Depth-first pre-order traversal over `form` and every nested sub-form."""
    stack = [form]
    while stack:
        cur = stack.pop()
        yield cur
        stack.extend(reversed(children(cur)))


def contains(forms, kind: type) -> bool:
    """Does any form in `forms` (searched at every depth) have type `kind`?"""
    return any(isinstance(f, kind) for top in forms for f in walk(top))
