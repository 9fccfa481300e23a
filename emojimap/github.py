import json
import re
from typing import cast

from emojimap.codepoints import strip_leading_zeros
from emojimap.http import get_url
from emojimap.logger import get_logger


logger = get_logger(__name__)

GITHUB_EMOJI_URL = "https://api.github.com/emojis"
CODEPOINTS_REGEX = re.compile(r"/unicode/(.+?)\.png")


def parse_github_emojis(raw_data: dict[str, str]) -> dict[str, str]:
    """
    Extract the codepoint sequences from the image urls of the github emoji api.

    Custom emoji (e.g. :octocat:) have no unicode image and are skipped.

    :param raw_data: mapping of emoji names to image urls
    :return: mapping of emoji names to codepoint sequences
    """

    result: dict[str, str] = {}
    for name, url in raw_data.items():
        if not (match := CODEPOINTS_REGEX.search(url)):
            logger.debug("Skipping custom github emoji %s", name)
            continue

        result[name] = strip_leading_zeros(match.group(1))

    return result


async def get_github_data() -> dict[str, str]:
    """Fetch the github emoji api and return a mapping of emoji names to codepoint sequences."""

    result = parse_github_emojis(cast(dict[str, str], json.loads(await get_url(GITHUB_EMOJI_URL))))
    logger.info("Found %d github emojis", len(result))

    return result
