"""Emoji detection for chat messages."""

import re
from typing import Optional

# Maximum number of emoji a message may contain and still be shown enlarged
MAX_EMOJI_ONLY_COUNT = 5

# Code points that display as emoji by default
_EMOJI_PRESENTATION = (
    "[\u231a\u231b\u23e9-\u23ec\u23f0\u23f3\u25fd\u25fe\u2614\u2615"
    "\u2648-\u2653\u267f\u2693\u26a1\u26aa\u26ab\u26bd\u26be\u26c4\u26c5"
    "\u26ce\u26d4\u26ea\u26f2\u26f3\u26f5\u26fa\u26fd\u2705\u270a\u270b"
    "\u2728\u274c\u274e\u2753-\u2755\u2757\u2795-\u2797\u27b0\u27bf"
    "\u2b1b\u2b1c\u2b50\u2b55"
    "\U0001F004\U0001F0CF\U0001F18E\U0001F191-\U0001F19A\U0001F201"
    "\U0001F21A\U0001F22F\U0001F232-\U0001F236\U0001F238-\U0001F23A"
    "\U0001F250\U0001F251\U0001F300-\U0001F320\U0001F32D-\U0001F335"
    "\U0001F337-\U0001F37C\U0001F37E-\U0001F393\U0001F3A0-\U0001F3CA"
    "\U0001F3CF-\U0001F3D3\U0001F3E0-\U0001F3F0\U0001F3F4"
    "\U0001F3F8-\U0001F43E\U0001F440\U0001F442-\U0001F4FC"
    "\U0001F4FF-\U0001F53D\U0001F54B-\U0001F54E\U0001F550-\U0001F567"
    "\U0001F57A\U0001F595\U0001F596\U0001F5A4\U0001F5FB-\U0001F64F"
    "\U0001F680-\U0001F6C5\U0001F6CC\U0001F6D0-\U0001F6D2"
    "\U0001F6D5-\U0001F6D7\U0001F6DC-\U0001F6DF\U0001F6EB\U0001F6EC"
    "\U0001F6F4-\U0001F6FC\U0001F7E0-\U0001F7EB\U0001F7F0"
    "\U0001F90C-\U0001F93A\U0001F93C-\U0001F945\U0001F947-\U0001F9FF"
    "\U0001FA70-\U0001FAFF]"
)

# Emoji-capable code points that display as text unless followed by U+FE0F
_TEXT_PRESENTATION = (
    "[\u00a9\u00ae\u203c\u2049\u2122\u2139\u2194-\u2199\u21a9\u21aa"
    "\u2328\u23cf\u23ed-\u23ef\u23f1\u23f2\u23f8-\u23fa\u24c2\u25aa\u25ab"
    "\u25b6\u25c0\u25fb\u25fc\u2600-\u27bf\u2934\u2935\u2b05-\u2b07"
    "\u3030\u303d\u3297\u3299\U0001F000-\U0001FAFF]"
)

_EMOJI = f"(?:{_EMOJI_PRESENTATION}|{_TEXT_PRESENTATION}\ufe0f)"
_MODIFIERS = "[\ufe0f\U0001F3FB-\U0001F3FF]*"

EMOJI_PATTERN = re.compile(
    # Regional indicator pairs (flags)
    "[\U0001F1E6-\U0001F1FF]{2}"
    # Keycaps
    "|[0-9#*]\ufe0f?\u20e3"
    # Single emoji, optionally joined into ZWJ sequences
    f"|{_EMOJI}{_MODIFIERS}(?:\u200d{_EMOJI}{_MODIFIERS})*"
)


def count_emoji(content: str) -> int:
    """Count emoji sequences in content."""
    if not content:
        return 0
    return len(EMOJI_PATTERN.findall(content))


def emoji_only_size(content: str) -> Optional[int]:
    """
    Get the display size tier of a message made only of emoji.

    Whitespace is ignored. The chat client enlarges such messages, more so
    the fewer emoji they hold.

    Args:
        content: Raw message content

    Returns:
        1 for a single emoji, 2 for two, 3 for three to
        MAX_EMOJI_ONLY_COUNT, or None for any other message
    """
    trimmed = (content or "").strip()
    if not trimmed:
        return None

    remainder = re.sub(r"\s", "", EMOJI_PATTERN.sub("", trimmed))
    if remainder:
        return None

    count = count_emoji(trimmed)
    if not 0 < count <= MAX_EMOJI_ONLY_COUNT:
        return None
    return min(count, 3)
