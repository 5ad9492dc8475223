from .chain import compose, flat_map, map_left, pipe
from .exceptions import MissingBranchError
from .result import (
    Either,
    Left,
    Right,
    fold,
    is_left,
    is_right,
    left,
    map,
    right,
)

__all__ = [
    "Either",
    "Left",
    "Right",
    "left",
    "right",
    "is_left",
    "is_right",
    "fold",
    "map",
    "flat_map",
    "map_left",
    "compose",
    "pipe",
    "MissingBranchError",
]
