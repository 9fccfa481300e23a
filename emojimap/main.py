import sys
from asyncio import gather, run
from importlib.metadata import PackageNotFoundError, version

from emojimap.emitter import OUTPUT_FILENAME, write_mapping
from emojimap.environment import SENTRY_DSN
from emojimap.errors import EmojiMapError
from emojimap.github import get_github_data
from emojimap.logger import get_logger, setup_sentry
from emojimap.reconcile import reconcile
from emojimap.unicode import get_unicode_data


logger = get_logger(__name__)

DEFAULT_VERSION = "unknown"


def get_version() -> str:
    """Return the installed version of emojimap, or a placeholder when running from a plain checkout."""

    try:
        return version("emojimap")
    except PackageNotFoundError:
        return DEFAULT_VERSION


async def main() -> None:
    """Generate the emoji annotation map and write it to the output file."""

    github_data, unicode_data = await gather(get_github_data(), get_unicode_data())
    await write_mapping(reconcile(github_data, unicode_data), OUTPUT_FILENAME)


def run_main() -> None:
    if SENTRY_DSN:
        setup_sentry(SENTRY_DSN, "emojimap", get_version())

    try:
        run(main())
    except EmojiMapError as e:
        logger.error(str(e))
        sys.exit(1)
