"""Matchers subpackage: named matchers behind ``@name(args)@`` expressions.

- MatcherExpression: parsed ``@name(arg, ...)@`` placeholder
- MatcherRegistry: name -> Matcher lookup, injected into the comparator
- default_registry: fresh registry holding the standard matchers
"""

from json_tree_validator.matchers.expression import (
    MatcherExpression,
    is_matcher_expression,
)
from json_tree_validator.matchers.registry import (
    FunctionMatcher,
    MatcherRegistry,
    default_registry,
)

__all__ = [
    "FunctionMatcher",
    "MatcherExpression",
    "MatcherRegistry",
    "default_registry",
    "is_matcher_expression",
]
