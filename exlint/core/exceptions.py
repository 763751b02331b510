"""
Custom exceptions for exlint.

Every fatal condition of a run surfaces as one of these. A command
that merely finds issues does not raise; it returns a Failure result.
"""


class ExlintError(Exception):
    """Base exception for all exlint errors."""

    def __init__(self, message: str, stage: str = None, details: dict = None):
        super().__init__(message)
        self.stage = stage
        self.details = details or {}

    def __str__(self):
        base_msg = super().__str__()
        if self.stage:
            return f"[{self.stage}] {base_msg}"
        return base_msg


class OptionParseError(ExlintError):
    """Raised when the command line contains an unknown or malformed switch."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, stage="Options", details=details)


class ConfigurationError(ExlintError):
    """Raised when the project configuration cannot be loaded."""

    def __init__(self, message: str, details: dict = None):
        super().__init__(message, stage="Configuration", details=details)


class SourceError(ExlintError):
    """Raised when source files cannot be found or read."""

    def __init__(self, message: str, details: dict = None, stage: str = "Sources"):
        super().__init__(message, stage=stage, details=details)


class RequireError(SourceError):
    """Raised when a file listed under `requires` fails to load."""

    def __init__(self, path: str, reason: str):
        super().__init__(
            f"Could not require {path}: {reason}",
            details={"path": path, "reason": reason},
            stage="Requires",
        )


class CheckError(ExlintError):
    """Raised when a check crashes and crash_on_error is set."""

    def __init__(self, check: str, filename: str, reason: str):
        super().__init__(
            f"{check} crashed on {filename}: {reason}",
            stage="Analysis",
            details={"check": check, "filename": filename, "reason": reason},
        )
