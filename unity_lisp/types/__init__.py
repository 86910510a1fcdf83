from unity_lisp.types.forms import (
    Word, Number, String, Keyword, InfixOperator, Accessor, Method, Hint,
    Yield, PercentArg, SugarLambda, KeywordFn, ListForm, VectorForm, MapForm,
)
from unity_lisp.types.macro_registry import MacroRegistry, MacroDefinition
from unity_lisp.types.errors import UnityLispError, UnitySyntaxError, UnityUsageError
