from .option import Option, OptionType, Some, NONE, UnwrapError, from_nullable
from .query import is_some, is_none, is_some_and, is_none_or
from .extract import unwrap, unwrap_or, unwrap_or_else, expect, match, Matcher, to_nullable
from .logical import or_, or_else, and_, and_then, flat_map, xor
from .transform import map, map_or, map_or_else, filter, flat, zip, zip_with, inspect
from .logger import ConsoleLogger, get_logger, set_logger

__all__ = [
    "Option", "OptionType", "Some", "NONE", "UnwrapError", "from_nullable",
    "is_some", "is_none", "is_some_and", "is_none_or",
    "unwrap", "unwrap_or", "unwrap_or_else", "expect", "match", "Matcher", "to_nullable",
    "or_", "or_else", "and_", "and_then", "flat_map", "xor",
    "map", "map_or", "map_or_else", "filter", "flat", "zip", "zip_with", "inspect",
    "ConsoleLogger", "get_logger", "set_logger",
]
