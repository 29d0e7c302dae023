# Core type aliases for the rtlisp data model.
# Plain Python values represent both code (forms) and runtime values:
# int/float for numbers, bool for #t/#f, Symbol for names, list for lists.
#
# Naming guidance:
# - SExpression: use in reader/analyzer code to denote syntactic forms.
# - LispValue:  use in runtime code to denote evaluated values.
# - Node:       an analyzed expression, executed against an Environment.

from typing import Any, Callable

# Runtime value alias
LispValue = Any
# Forms alias (interchangeable with LispValue)
SExpression = LispValue

# Analyzed node: Environment -> LispValue
Node = Callable[..., LispValue]

# Analyzer function type, passed into the special-form handlers
AnalyzerFn = Callable[[SExpression], Node]

__version__ = "0.1.0"
