"""Split statement text into per-record blocks on recurring section markers."""
import re
from typing import List, Pattern

# "Share Units - Release (R123456)" heads every release confirmation
RELEASE_MARKER = re.compile(re.escape("Share Units - Release ("))
# "Withdrawal on 17-Mar-2023 ..." heads every sale; the marker eats the rest of its line
SALE_MARKER = re.compile(r"Withdrawal on [^\n]+")


def segment(text: str, marker: Pattern[str]) -> List[str]:
    """
    Fragments that follow each marker occurrence, in document order.
    Text before the first marker is front matter and is dropped.
    """
    if not text:
        return []
    return marker.split(text)[1:]
