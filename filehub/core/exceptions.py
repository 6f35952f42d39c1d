"""Exceptions raised by the file storage core.

Routers never catch these; the handlers registered in ``filehub.main``
turn them into HTTP responses. Anything else (``OSError`` from a failed
read, write or mkdir) is left to propagate as a server error.
"""


class FileHubError(Exception):
    """Base class for expected, user-facing failures."""

    status_code = 500


class BadInputError(FileHubError):
    """Raised when a request carries unusable input."""

    status_code = 400


class EmptyUploadError(BadInputError):
    """Raised when an upload has no content or no file name."""

    def __init__(self) -> None:
        super().__init__("No file selected")


class InvalidNameError(BadInputError):
    """Raised when a user name or file name is not a single path segment."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid name: {name!r}")


class FileConflictError(FileHubError):
    """Raised when an upload would replace a file without ``overwrite``."""

    status_code = 409

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"File already exists: {name}")


class FileNotFoundInNamespaceError(FileHubError):
    """Raised when a download or preview targets a missing file."""

    status_code = 404

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"File not found: {name}")


class NotAuthenticatedError(FileHubError):
    """Raised by the current-user dependency when no user is signed in."""

    status_code = 401

    def __init__(self) -> None:
        super().__init__("Not authenticated")
