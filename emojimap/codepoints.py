import re

from emojimap.errors import LeftoverJoinerError


ZWJ = "200d"  # zero width joiner
VS16 = "fe0f"  # emoji presentation selector

LEADING_ZEROS_REGEX = re.compile(r"(^|-)0+(?=[0-9a-f])")
JOINER_REGEX = re.compile(rf"-({ZWJ}|{VS16})(?=-|$)")
LEFTOVER_JOINER_REGEX = re.compile(rf"(^|-)({ZWJ}|{VS16})(-|$)")


def string_to_codepoints(text: str) -> str:
    """Return the dash separated hex codepoints of a string, e.g. "\\U0001F44D\\U0001F3FB" -> "1f44d-1f3fb"."""

    return "-".join(f"{ord(c):x}" for c in text)


def strip_leading_zeros(codepoints: str) -> str:
    """Remove leading zeros from every group of a lowercased codepoint sequence, e.g. "0023-20E3" -> "23-20e3"."""

    return LEADING_ZEROS_REGEX.sub(r"\1", codepoints.lower())


def strip_joiners_and_selectors(codepoints: str) -> str:
    """Remove all zero width joiners and variation selectors from a codepoint sequence."""

    stripped = JOINER_REGEX.sub("", codepoints)
    if LEFTOVER_JOINER_REGEX.search(stripped):
        raise LeftoverJoinerError(stripped, codepoints)

    return stripped
