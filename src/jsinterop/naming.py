"""Identifier conversion between JavaScript and C#."""

from __future__ import annotations

import re

# C# reserved keywords; escaped with "@" when used as parameter names
CSHARP_KEYWORDS = frozenset(
    """
    abstract as base bool break byte case catch char checked class const
    continue decimal default delegate do double else enum event explicit
    extern false finally fixed float for foreach goto if implicit in int
    interface internal is lock long namespace new null object operator out
    override params private protected public readonly ref return sbyte sealed
    short sizeof stackalloc static string struct switch this throw true try
    typeof uint ulong unchecked unsafe ushort using virtual void volatile while
    """.split()
)

_SEPARATORS = re.compile(r"[-_\s.]+")


def to_pascal_case(name: str) -> str:
    """Convert ``get-user_name`` to ``GetUserName``.

    Words are split on hyphens, underscores, dots and whitespace, then each is
    capitalized and the rest lowered: ``getUserName`` -> ``Getusername``,
    ``API_KEY`` -> ``ApiKey``.
    """
    words = [w for w in _SEPARATORS.split(name) if w]
    return "".join(word[0].upper() + word[1:].lower() for word in words)


def escape_identifier(name: str) -> str:
    """Prefix C# keywords with ``@`` so they can be used as identifiers."""
    return f"@{name}" if name in CSHARP_KEYWORDS else name
