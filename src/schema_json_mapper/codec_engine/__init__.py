"""Codec engine exports."""

from .constructor_strategy import instantiate, select_constructor_plan
from .json_codec import JsonCodec
from .traversal import DEFAULT_MAX_LEVELS, TraversalFrame

__all__ = [
    "DEFAULT_MAX_LEVELS",
    "JsonCodec",
    "TraversalFrame",
    "instantiate",
    "select_constructor_plan",
]
