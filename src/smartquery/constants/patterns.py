"""Whitelist regular expressions used to validate query fragments.

All patterns are compiled with ``re.ASCII`` so ``\\w`` means
``[A-Za-z0-9_]`` only. Patterns are applied with ``fullmatch`` unless noted.

``EXPRESSION`` accepts the same strings as the historical pattern
``^\\(?('?(\\w|-|\\.)+'?,?)+\\)?$`` but is written without nested quantifiers
over the same characters, so rejection of long invalid input stays linear.
"""

import re

DIGITS = re.compile(r"\d+", re.ASCII)

IDENTIFIER = re.compile(r"'?\w+'?", re.ASCII)

# Tokens of word/dash/dot characters, separated by a quote, two quotes or an
# optionally quoted comma, optionally wrapped in one pair of parentheses.
EXPRESSION = re.compile(
    r"\(?'?[\w.-]+(?:(?:''?|'?,'?)[\w.-]+)*'?,?\)?",
    re.ASCII,
)

DATETIME_LITERAL = re.compile(r"[\w:.-]+", re.ASCII)

# date({table:column}) or a one level nested call such as date(substr('2020-01-01',1,10))
FUNCTION_DATE = re.compile(
    r"\w+\((\{\w+:\w+\}|[a-zA-Z]+\([\d',-]+\))\)",
    re.ASCII,
)

# date(substr(...)) / datetime(substr(...)); applied with ``match``, the
# trailing part of the expression is not anchored.
FUNCTION_DATETIME = re.compile(
    r"date(\w+)?\(substr\((\{[\w-]+:[\w.-]+\}|'[\w:.-]+')[\d',-]+\)\)",
    re.ASCII,
)
