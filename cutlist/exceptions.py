"""
cutlist.exceptions - Custom exception classes.

All Cutlist-specific exceptions inherit from CutlistError.
"""


class CutlistError(Exception):
    """Base exception for all Cutlist errors."""

    pass


class ConfigError(CutlistError):
    """Configuration loading or validation error."""

    pass


class SnapshotError(CutlistError):
    """Sequence snapshot file is missing or malformed."""

    pass


class ExtractionError(CutlistError):
    """Sequence extraction error."""

    kind = "host_script_error"


class NoActiveSequenceError(ExtractionError):
    """No sequence is open in the host application."""

    kind = "no_active_sequence"

    def __init__(self, message: str | None = None):
        super().__init__(
            message or "No active sequence found. Please open a sequence in the timeline."
        )


class HostScriptError(ExtractionError):
    """Unexpected host failure while walking the sequence."""

    kind = "host_script_error"

    def __init__(self, message: str, cause: BaseException | None = None):
        self.message = message
        self.cause = cause
        super().__init__(message)


class MalformedPayloadError(CutlistError):
    """Extractor payload could not be decoded."""

    def __init__(self, message: str, raw: str | None = None):
        self.message = message
        self.raw = raw
        super().__init__(message)
