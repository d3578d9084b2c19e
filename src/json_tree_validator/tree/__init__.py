"""Tree subpackage: Tree Value kinds and comparison path nodes.

Re-exports the public API for the tree module:
- PathNode: an addressed position pairing actual and expected values
- ValueKind: StrEnum of the six Tree Value kinds
- kind_of / numbers_equal / to_json_text / parse_json: value helpers
"""

from json_tree_validator.tree.nodes import PathNode
from json_tree_validator.tree.values import (
    ABSENT,
    IGNORE_MARKER,
    ValueKind,
    is_ignore_marker,
    kind_of,
    numbers_equal,
    parse_json,
    to_display_text,
    to_json_text,
    to_matcher_text,
)

__all__ = [
    "ABSENT",
    "IGNORE_MARKER",
    "PathNode",
    "ValueKind",
    "is_ignore_marker",
    "kind_of",
    "numbers_equal",
    "parse_json",
    "to_display_text",
    "to_json_text",
    "to_matcher_text",
]
