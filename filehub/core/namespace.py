# filehub/core/namespace.py
import logging
from pathlib import Path

from filehub.core.exceptions import InvalidNameError

logger = logging.getLogger(__name__)

ANONYMOUS = "anonymous"


def check_segment(name: str) -> str:
    """Return ``name`` if it is usable as a single path segment.

    Both user names and uploaded file names end up joined onto a directory,
    so anything that could climb out of it or into a subdirectory is refused.
    """
    if (
        not name
        or name in (".", "..")
        or "/" in name
        or "\\" in name
        or "\x00" in name
    ):
        raise InvalidNameError(name)
    return name


class NamespaceResolver:
    """Maps a user identity to its private directory under ``root``."""

    def __init__(self, root: Path, anonymous: str = ANONYMOUS):
        self.root = Path(root)
        self.anonymous = anonymous

    def resolve(self, identity: str | None) -> Path:
        user = check_segment(identity or self.anonymous)
        path = self.root / user

        # check-then-create; exist_ok covers a concurrent create
        if not path.is_dir():
            logger.info("Creating namespace directory: %s", path)
            path.mkdir(parents=True, exist_ok=True)
        return path


def file_path(namespace: Path, name: str) -> Path:
    return namespace / check_segment(name)
