from emojimap.codepoints import strip_joiners_and_selectors
from emojimap.errors import AmbiguousCodepointError, UnmatchedVendorEntryError
from emojimap.logger import get_logger


logger = get_logger(__name__)


def build_stripped_index(unicode_data: dict[str, str]) -> dict[str, str]:
    """Map the stripped form of every unicode codepoint sequence to its fully-qualified form."""

    index: dict[str, str] = {}
    for codepoints in unicode_data.values():
        stripped = strip_joiners_and_selectors(codepoints)
        if (existing := index.get(stripped)) is not None and existing != codepoints:
            raise AmbiguousCodepointError(existing, codepoints)

        index[stripped] = codepoints

    return index


def reconcile(github_data: dict[str, str], unicode_data: dict[str, str]) -> dict[str, str]:
    """
    Merge the github and unicode emoji maps.

    Github codepoint sequences often lack the zero width joiners and variation selectors of the
    unicode data, so every github name is mapped to the fully-qualified unicode sequence with the
    same stripped form. Unicode emoji without a github name are added under their unicode name.

    :param github_data: mapping of github emoji names to (bare) codepoint sequences
    :param unicode_data: mapping of unicode emoji names to fully-qualified codepoint sequences
    :return: mapping of emoji names to fully-qualified codepoint sequences
    """

    github_to_unicode = build_stripped_index(unicode_data)

    result: dict[str, str] = {}
    codepoints_seen: set[str] = set()
    for name, codepoints in github_data.items():
        if (real_codepoints := github_to_unicode.get(codepoints)) is None:
            raise UnmatchedVendorEntryError(name, codepoints)

        result[name] = real_codepoints
        codepoints_seen.add(real_codepoints)

    for name, codepoints in unicode_data.items():
        if codepoints in codepoints_seen:
            continue

        if name in result:
            # known gap: the unicode name silently replaces a github name for a different emoji
            logger.warning("Unicode emoji %s (%s) replaces github emoji %s", name, codepoints, result[name])
        result[name] = codepoints

    logger.info("Generated map with %d emojis", len(result))
    return result
