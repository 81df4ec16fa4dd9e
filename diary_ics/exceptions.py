"""Exception hierarchy for diary feed operations."""


class DiaryIcsError(Exception):
    """Base exception for diary feed operations."""

    pass


class DateFormatError(DiaryIcsError):
    """Diary naming pattern contains an unsupported token."""

    pass


class DiaryDateError(DiaryIcsError):
    """Date could not be resolved for a file that was matched as a diary."""

    pass


class VaultNotFoundError(DiaryIcsError):
    """Vault directory does not exist."""

    pass


class VaultReadError(DiaryIcsError):
    """Note file could not be read or parsed."""

    pass


class SettingsError(DiaryIcsError):
    """Settings file is unreadable or holds invalid values."""

    pass


class FeedEncodingError(DiaryIcsError):
    """Error while encoding events as a calendar document."""

    pass


class ServerBindError(DiaryIcsError):
    """HTTP server could not bind to the configured address."""

    pass
