"""Logic for collecting see-also references from docblock tags."""

from typing import Any

from apidoc_md.as_text import as_text
from apidoc_md.see_also import SeeAlso


def parse_see_also(tags: list[dict[str, Any]]) -> list[SeeAlso]:
    """Collect ``see`` tags, then ``link`` tags, in tag order.

    A ``link`` tag whose description merely repeats the link gets an empty
    description.
    """
    see_also = [
        SeeAlso(link=as_text(t.get("link")), description=as_text(t.get("description")))
        for t in tags
        if t.get("name") == "see"
    ]
    for t in tags:
        if t.get("name") != "link":
            continue
        link = as_text(t.get("link"))
        description = as_text(t.get("description"))
        see_also.append(
            SeeAlso(link=link, description="" if description == link else description)
        )
    return see_also
