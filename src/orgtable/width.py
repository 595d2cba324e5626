"""Display width of cell text.

Editors render CJK and full-width characters two columns wide, so column
alignment has to count them twice. Widths are measured per code point.

Usage:
    from orgtable.width import get_display_width

    get_display_width("aあ")  # 3
"""

import re

# Code point ranges rendered two columns wide:
# CJK symbols and punctuation, Hiragana, Katakana, CJK Extension A,
# CJK Unified Ideographs, CJK compatibility ideographs, full-width forms.
WIDE_RANGES: tuple[tuple[int, int], ...] = (
    (0x3000, 0x303F),
    (0x3040, 0x309F),
    (0x30A0, 0x30FF),
    (0x3400, 0x4DBF),
    (0x4E00, 0x9FFF),
    (0xF900, 0xFAFF),
    (0xFF01, 0xFF60),
    (0xFFE0, 0xFFE6),
)

_WIDE_CHAR = re.compile(
    "[" + "".join(f"{chr(lo)}-{chr(hi)}" for lo, hi in WIDE_RANGES) + "]"
)


def is_wide_char(char: str) -> bool:
    """Check if a single character is rendered two columns wide."""
    return _WIDE_CHAR.fullmatch(char) is not None


def get_display_width(text: str) -> int:
    """Return the rendered column width of text.

    Each wide character contributes 2, every other code point 1.

    Examples:
        >>> get_display_width("a")
        1
        >>> get_display_width("\\u3042")
        2
        >>> get_display_width("")
        0
    """
    return len(text) + len(_WIDE_CHAR.findall(text))
