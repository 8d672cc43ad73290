"""Utility for unwrapping single-paragraph HTML descriptions."""

import re

OUTER_P_RE = re.compile(r"^<p>|</p>$")


def strip_outer_paragraph_tags(text: str | None) -> str:
    """Strip the outer ``<p>`` tags of a description; inner ones are kept."""
    if not text:
        return ""
    return OUTER_P_RE.sub("", text)
