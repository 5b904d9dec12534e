"""Closed set of Gobstones token names.

Every built-in keyword, type, value, command and expression of the
Gobstones Language has one locale-agnostic token name. Locale definitions
map these names to spellings; abstract code spells them decorated
(e.g. "$GBS_COMMAND_DROP$").

Python 3.13+. Zero external dependencies.
"""

from gbstranslator.types import TokenName

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Token groups
    "DEFINITION_TOKENS",
    "CONTROL_TOKENS",
    "ASSIGNMENT_TOKENS",
    "OPERATOR_TOKENS",
    "TYPE_TOKENS",
    "VALUE_TOKENS",
    "COMMAND_TOKENS",
    "EXPRESSION_TOKENS",
    "ERROR_TOKENS",
    # Whole set
    "TOKEN_NAMES",
    "is_token_name",
]

DEFINITION_TOKENS: tuple[TokenName, ...] = (
    "GBS_DEFINITION_PROGRAM",
    "GBS_DEFINITION_INTERACTIVE",
    "GBS_DEFINITION_PROCEDURE",
    "GBS_DEFINITION_FUNCTION",
    "GBS_DEFINITION_RETURN",
    "GBS_DEFINITION_TYPE",
    "GBS_DEFINITION_IS",
    "GBS_DEFINITION_RECORD",
    "GBS_DEFINITION_VARIANT",
    "GBS_DEFINITION_CASE",
    "GBS_DEFINITION_FIELD",
)

CONTROL_TOKENS: tuple[TokenName, ...] = (
    "GBS_CONTROL_IF",
    "GBS_CONTROL_THEN",
    "GBS_CONTROL_ELSE",
    "GBS_CONTROL_ELSEIF",
    "GBS_CONTROL_CHOOSE",
    "GBS_CONTROL_WHEN",
    "GBS_CONTROL_OTHERWISE",
    "GBS_CONTROL_SWITCH",
    "GBS_CONTROL_TO",
    "GBS_CONTROL_MATCHING",
    "GBS_CONTROL_SELECT",
    "GBS_CONTROL_ON",
    "GBS_CONTROL_DEFAULT",
    "GBS_CONTROL_REPEAT",
    "GBS_CONTROL_WHILE",
    "GBS_CONTROL_FOREACH",
    "GBS_CONTROL_IN",
)

ASSIGNMENT_TOKENS: tuple[TokenName, ...] = ("GBS_ASSIGN_LET",)

# "&&" and "||" are symbols, not words, so they never need translation
OPERATOR_TOKENS: tuple[TokenName, ...] = (
    "GBS_OPERATOR_NOT",
    "GBS_OPERATOR_DIV",
    "GBS_OPERATOR_MOD",
)

TYPE_TOKENS: tuple[TokenName, ...] = (
    "GBS_TYPE_COLOR",
    "GBS_TYPE_DIR",
    "GBS_TYPE_NUMBER",
    "GBS_TYPE_BOOL",
    "GBS_TYPE_STRING",
    "GBS_TYPE_TUPLE",
    "GBS_TYPE_LIST",
    "GBS_TYPE_VARIANT",
    "GBS_TYPE_RECORD",
    "GBS_TYPE_EVENT",
)

VALUE_TOKENS: tuple[TokenName, ...] = (
    "GBS_COLOR_BLUE",
    "GBS_COLOR_BLACK",
    "GBS_COLOR_RED",
    "GBS_COLOR_GREEN",
    "GBS_DIR_NORTH",
    "GBS_DIR_EAST",
    "GBS_DIR_SOUTH",
    "GBS_DIR_WEST",
    "GBS_BOOL_TRUE",
    "GBS_BOOL_FALSE",
    "GBS_EVENT_INIT",
    "GBS_EVENT_TIMEOUT",
)

COMMAND_TOKENS: tuple[TokenName, ...] = (
    "GBS_COMMAND_GRAB",
    "GBS_COMMAND_DROP",
    "GBS_COMMAND_MOVE",
    "GBS_COMMAND_MOVETOEDGE",
    "GBS_COMMAND_CLEANBOARD",
)

EXPRESSION_TOKENS: tuple[TokenName, ...] = (
    "GBS_EXPRESSION_NUMSTONES",
    "GBS_EXPRESSION_HASSTONES",
    "GBS_EXPRESSION_CANMOVE",
    "GBS_EXPRESSION_NEXT",
    "GBS_EXPRESSION_PREV",
    "GBS_EXPRESSION_OPPOSITE",
    "GBS_EXPRESSION_ISEMPTY",
    "GBS_EXPRESSION_HEAD",
    "GBS_EXPRESSION_TAIL",
    "GBS_EXPRESSION_LAST",
    "GBS_EXPRESSION_INIT",
    "GBS_EXPRESSION_MINCOLOR",
    "GBS_EXPRESSION_MAXCOLOR",
    "GBS_EXPRESSION_MINDIR",
    "GBS_EXPRESSION_MAXDIR",
    "GBS_EXPRESSION_MINBOOL",
    "GBS_EXPRESSION_MAXBOOL",
)

ERROR_TOKENS: tuple[TokenName, ...] = (
    "GBS_ERROR_COMMAND_BOOM",
    "GBS_ERROR_EXPRESSION_BOOM",
    "GBS_ERROR_TYPECHECK",
)

TOKEN_NAMES: tuple[TokenName, ...] = (
    *DEFINITION_TOKENS,
    *CONTROL_TOKENS,
    *ASSIGNMENT_TOKENS,
    *OPERATOR_TOKENS,
    *TYPE_TOKENS,
    *VALUE_TOKENS,
    *COMMAND_TOKENS,
    *EXPRESSION_TOKENS,
    *ERROR_TOKENS,
)

_TOKEN_NAME_SET: frozenset[TokenName] = frozenset(TOKEN_NAMES)


def is_token_name(name: str) -> bool:
    """Return True if name belongs to the closed token-name set."""
    return name in _TOKEN_NAME_SET
