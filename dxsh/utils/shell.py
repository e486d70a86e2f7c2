"""
Quoting helpers for text placed into generated bash.
"""

import shlex

# Characters bash still interprets inside a double-quoted string
_DOUBLE_QUOTE_SPECIALS = ("\\", '"', "$", "`")


def escape_double_quoted(text: str) -> str:
    """
    Escape ``text`` for use between double quotes in bash.

    Command substitution, parameter expansion and quote termination all
    come out literal: ``v1$(id)"`` becomes ``v1\\$(id)\\"``.
    """
    for char in _DOUBLE_QUOTE_SPECIALS:
        text = text.replace(char, "\\" + char)
    return text


def quote_word(text: str) -> str:
    """Quote ``text`` as a single standalone shell word."""
    return shlex.quote(text)
