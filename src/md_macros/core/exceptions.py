"""Custom exceptions for md-macros."""


class MacroParseError(Exception):
    """Base exception for all md-macros parse failures."""

    def __init__(self, message: str, details: dict | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MalformedTitleError(MacroParseError):
    """Raised when a link, image or reference title is not double-quoted."""

    def __init__(self, title: str) -> None:
        super().__init__(
            f"Malformed title {title!r}: titles must be wrapped in double quotes",
            details={"title": title},
        )
        self.title = title


class DuplicateReferenceKeyError(MacroParseError):
    """Raised when the same reference key is defined more than once."""

    def __init__(self, key: str) -> None:
        super().__init__(
            f"Duplicate reference key {key!r}",
            details={"key": key},
        )
        self.key = key
