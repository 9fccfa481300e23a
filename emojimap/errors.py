class EmojiMapError(Exception):
    """Base class for all fatal errors raised while generating the emoji map."""


class FetchError(EmojiMapError):
    def __init__(self, url: str, exception: Exception):
        super().__init__(f"Could not fetch {url}: {exception}")

        self.url: str = url
        self.exception: Exception = exception


class MemberNotFoundError(EmojiMapError):
    def __init__(self, member: str):
        super().__init__(f"Member {member} not found in tar archive")

        self.member: str = member


class PatternMatchError(EmojiMapError):
    def __init__(self) -> None:
        super().__init__("Could not extract emoji data")


class AmbiguousNameError(EmojiMapError):
    def __init__(self, name: str, existing: str, new: str):
        super().__init__(f"Ambiguous Unicode emoji name {name}: {existing} <-> {new}")

        self.name: str = name
        self.existing: str = existing
        self.new: str = new


class AmbiguousCodepointError(EmojiMapError):
    def __init__(self, existing: str, new: str):
        super().__init__(f"Ambiguous Unicode emoji?! {existing} <-> {new}")

        self.existing: str = existing
        self.new: str = new


class UnmatchedVendorEntryError(EmojiMapError):
    def __init__(self, name: str, codepoints: str):
        super().__init__(f"GitHub emoji {name} ({codepoints}) has no Unicode equivalent!")

        self.name: str = name
        self.codepoints: str = codepoints


class LeftoverJoinerError(EmojiMapError):
    def __init__(self, stripped: str, original: str):
        super().__init__(f"Leftover ZWJ or VS16 in emoji {stripped} ({original})")

        self.stripped: str = stripped
        self.original: str = original


class StaleFixupError(EmojiMapError):
    def __init__(self, name: str, codepoints: str):
        super().__init__(
            f"Right-facing emoji {name} ({codepoints}) includes unexpected skin tone qualifier; "
            "check if this fixup is still necessary"
        )

        self.name: str = name
        self.codepoints: str = codepoints
