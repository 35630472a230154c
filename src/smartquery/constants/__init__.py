"""Constants module for SmartQuery.

This module contains all constant values and enumerations used throughout
SmartQuery. It has no dependencies on other SmartQuery modules.

Organization:
    - sql: Operator, direction and joiner vocabularies plus their whitelists
    - patterns: Compiled whitelist regular expressions
"""

from smartquery.constants.sql import (
    Direction,
    FunctionKind,
    Joiner,
    Operator,
    WHITELISTED_DIRECTIONS,
    WHITELISTED_OPERATORS,
)
from smartquery.constants import patterns

__all__ = [
    "Direction",
    "FunctionKind",
    "Joiner",
    "Operator",
    "WHITELISTED_DIRECTIONS",
    "WHITELISTED_OPERATORS",
    "patterns",
]
