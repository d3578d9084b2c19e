"""algorithm subpackage: public API for the comparison engine.

Provides the recursive engine, its mode configuration and the ignore
expression matcher.  Import from this module (not from sub-modules directly)
to stay on the stable public interface.

Example::

    from json_tree_validator.algorithm import ComparisonEngine, ValidationConfig
    from json_tree_validator.matchers import default_registry
    from json_tree_validator.tree import PathNode

    engine = ComparisonEngine(ValidationConfig(), default_registry())
    engine.validate(PathNode.root({"a": [1, 2]}, {"a": [1, 2]}))
"""

from __future__ import annotations

from json_tree_validator.algorithm.config import ValidationConfig
from json_tree_validator.algorithm.engine import ComparisonEngine
from json_tree_validator.algorithm.ignore import IgnoreExpression, is_ignored

__all__ = ["ComparisonEngine", "IgnoreExpression", "ValidationConfig", "is_ignored"]
