"""Registry that disambiguates repeated anchors within one document."""

from collections import Counter


class AnchorRegistry:
    """Counts anchors in emission order and numbers the repeats.

    The first occurrence of an anchor is returned unchanged, the second gets
    ``-1``, the third ``-2`` and so on, mirroring how markdown renderers
    number duplicate headings.
    """

    def __init__(self) -> None:
        self.counts: Counter[str] = Counter()

    def register(self, anchor: str) -> str:
        """Record one more occurrence of ``anchor`` and return its final form."""
        seen = self.counts[anchor]
        self.counts[anchor] += 1
        return f"{anchor}-{seen}" if seen else anchor
