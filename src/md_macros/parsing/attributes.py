"""Attribute list decoding for custom macro arguments.

Reads ``key="value" key2='value2'`` fragments the way an HTML start tag's
attribute list would be read, minus entity decoding and tag rules. Only
quoted assignments produce entries; bare words and unquoted values are
skipped.
"""

from __future__ import annotations

import re

# Alternatives are tried left to right so quoted text is consumed as a unit
# and never re-scanned for ``key=`` pairs.
_ATTRIBUTE_RE = re.compile(
    r"""
    (?P<key>[^\s"'=<>/`]+)\s*=\s*(?:"(?P<dq>[^"]*)"|'(?P<sq>[^']*)')
    | "[^"]*"
    | '[^']*'
    | [^\s"'=]+
    | \S
    """,
    re.VERBOSE,
)


def normalize_attribute_text(text: str) -> str:
    """Collapse newlines, tabs and double spaces in a macro argument string."""
    return (
        text.strip()
        .replace("\n", " ")
        .replace("\t", " ")
        .replace("  ", " ")
        .strip()
    )


def decode_attributes(fragment: str) -> dict[str, str]:
    """Decode *fragment* into an attribute mapping.

    The first occurrence of a repeated key wins. Never raises; an empty or
    unrecognisable fragment gives an empty mapping.
    """
    attributes: dict[str, str] = {}
    for match in _ATTRIBUTE_RE.finditer(fragment):
        key = match.group("key")
        if key is None or key in attributes:
            continue
        value = match.group("dq")
        if value is None:
            value = match.group("sq")
        attributes[key] = value
    return attributes
