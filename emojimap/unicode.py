import json
import re
from typing import Any, Iterable, NamedTuple

from emojimap.codepoints import string_to_codepoints
from emojimap.errors import AmbiguousNameError, PatternMatchError, StaleFixupError
from emojimap.logger import get_logger
from emojimap.npm import get_package_file


logger = get_logger(__name__)

PACKAGE_NAME = "unicode-emoji"
PACKAGE_FILE = "package/unicode-emoji.js"
PACKAGE_EXTRACT_REGEX = re.compile(r"^export default (\{.*\});$")

# names for emoji whose descriptions are ambiguous after normalization
UNICODE_OVERRIDES: dict[str, str] = {
    "23-fe0f-20e3": "keycap: hash",
    "2a-fe0f-20e3": "keycap: asterisk",
}

SKIN_TONES: dict[str, str] = {
    "1f3fb": "light_skin_tone",
    "1f3fc": "medium-light_skin_tone",
    "1f3fd": "medium_skin_tone",
    "1f3fe": "medium-dark_skin_tone",
    "1f3ff": "dark_skin_tone",
}

SKIN_TONE_MODIFIER_REGEX = re.compile(r"-(1f3f[b-f])-")
NAME_STRIP_REGEX = re.compile(r"[^a-z0-9 -]")


class EmojiRecord(NamedTuple):
    emoji: str
    description: str
    variations: tuple["EmojiRecord", ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "EmojiRecord":
        return cls(
            emoji=data["emoji"],
            description=data["description"],
            variations=tuple(map(cls.from_dict, data.get("variations") or [])),
        )


def normalize_name(name: str) -> str:
    """Normalize an emoji description, e.g. "Flag: Côte d’Ivoire" -> "flag_cte_divoire"."""

    return NAME_STRIP_REGEX.sub("", name.lower()).replace(" ", "_")


def fixup_name(name: str, codepoints: str) -> str:
    """Append the missing skin tone to the names of right-facing emoji with a skin tone modifier."""

    if not name.endswith("_facing_right"):
        return name

    # HACK: as of unicode 15.1 several facing_right emoji are missing their skin tone descriptions
    if not (match := SKIN_TONE_MODIFIER_REGEX.search(codepoints)):
        return name

    if "skin_tone" in name:
        raise StaleFixupError(name, codepoints)

    return f"{name}_{SKIN_TONES[match.group(1)]}"


def extract_emoji_data(text: str) -> list[EmojiRecord]:
    """Extract the emoji records from the content of the unicode-emoji module."""

    if not (match := PACKAGE_EXTRACT_REGEX.match(text.strip())):
        raise PatternMatchError

    return [EmojiRecord.from_dict(emoji) for emoji in json.loads(match.group(1))["emojis"]]


class UnicodeMapBuilder:
    """Collects the names and codepoint sequences of emoji records and their variations."""

    def __init__(self) -> None:
        self.result: dict[str, str] = {}

    def add(self, name: str, codepoints: str) -> None:
        if (existing := self.result.get(name)) is not None and existing != codepoints:
            raise AmbiguousNameError(name, existing, codepoints)

        self.result[name] = codepoints

    def process_emoji(self, record: EmojiRecord) -> None:
        """Add an emoji record followed by all of its variations."""

        codepoints = string_to_codepoints(record.emoji)
        name = normalize_name(UNICODE_OVERRIDES.get(codepoints, record.description))
        self.add(fixup_name(name, codepoints), codepoints)

        for variation in record.variations:
            self.process_emoji(variation)


def build_unicode_map(records: Iterable[EmojiRecord]) -> dict[str, str]:
    """Map the normalized names of the given emoji records (including variations) to their codepoints."""

    builder = UnicodeMapBuilder()
    for record in records:
        builder.process_emoji(record)

    return builder.result


async def get_unicode_data() -> dict[str, str]:
    """Download the unicode-emoji package and return a mapping of emoji names to codepoint sequences."""

    raw_data = await get_package_file(PACKAGE_NAME, PACKAGE_FILE)
    result = build_unicode_map(extract_emoji_data(raw_data.decode("utf-8")))
    logger.info("Found %d unicode emojis including variations", len(result))

    return result
