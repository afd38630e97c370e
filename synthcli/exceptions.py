class SynthCliError(Exception):
    """Base exception for all synthcli errors."""

    def __init__(self, message: str, status_code: int | None = None, detail: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class AuthenticationError(SynthCliError):
    """Raised when the API key is missing or invalid (401)."""


class NotFoundError(SynthCliError):
    """Raised when the requested video does not exist (404)."""


class ApiError(SynthCliError):
    """Raised on any other non-success response from the API."""


class ConfigError(SynthCliError):
    """Raised when a setting in the credentials file or environment is malformed."""


class MissingApiKeyError(SynthCliError):
    """Raised when the credentials file still holds the placeholder key."""


class MissingArgumentError(SynthCliError):
    """Raised when a command is invoked without a required argument."""


class InvalidIndexError(SynthCliError):
    """Raised when a 1-based list index is outside the fetched list."""

    def __init__(self, index: int, size: int):
        bounds = f"1-{size}" if size else "list is empty"
        super().__init__(f"Video index {index} is out of range ({bounds})")
        self.index = index
        self.size = size


class NoScriptsError(SynthCliError):
    """Raised when the scripts directory holds no usable documents."""


class VideoNotReadyError(SynthCliError):
    """Raised when assets are requested for a video that is not complete."""

    def __init__(self, video_id: str, status: str):
        super().__init__(f"Video status is still {status} - can't download right now")
        self.video_id = video_id
        self.status = status


class AbortedError(SynthCliError):
    """Raised when the user declines a confirmation prompt."""


class WaitTimeout(SynthCliError):
    """Raised when a configured maximum wait elapses before the video completes."""

    def __init__(self, video_id: str, timeout: float):
        super().__init__(f"Video {video_id!r} did not complete within {timeout}s")
        self.video_id = video_id
        self.timeout = timeout
