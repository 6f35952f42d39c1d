"""Directory listing with extension filters and sort orders.

The listing is rebuilt from ``os.stat`` on every call; nothing about the
files is cached or stored elsewhere.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

logger = logging.getLogger(__name__)

DEFAULT_SORT = "date_desc"
DEFAULT_FILTER = "all"

SORT_KEYS = ("date_asc", "date_desc", "asc", "desc")

# filter key -> extensions it keeps; "all" keeps everything
FILTERS: dict[str, tuple[str, ...]] = {
    "c": (".c",),
    "jpg": (".jpg", ".jpeg"),
}


def file_extension(name: str) -> str:
    """Lowercased suffix including the dot.

    A name that is only an extension (".c") has one; a trailing dot does not
    count as an extension.
    """
    dot = name.rfind(".")
    if dot == -1 or dot == len(name) - 1:
        return ""
    return name[dot:].lower()


@dataclass(frozen=True)
class FileDescriptor:
    name: str
    absolute_path: Path
    created_at: datetime
    modified_at: datetime
    size_bytes: int
    uploaded_by: str
    edited_by: str

    @property
    def extension(self) -> str:
        return file_extension(self.name)

    @classmethod
    def from_path(cls, path: Path, owner: str) -> "FileDescriptor":
        stat = path.stat()
        # st_birthtime where the platform records it, otherwise ctime
        created = getattr(stat, "st_birthtime", stat.st_ctime)
        return cls(
            name=path.name,
            absolute_path=path.resolve(),
            created_at=datetime.fromtimestamp(created),
            modified_at=datetime.fromtimestamp(stat.st_mtime),
            size_bytes=stat.st_size,
            # the namespace owner is the only one who can upload or edit
            uploaded_by=owner,
            edited_by=owner,
        )


@dataclass(frozen=True)
class FileListing:
    files: list[FileDescriptor]
    sort: str
    filter: str


def effective_sort(sort: str | None) -> str:
    return sort if sort in SORT_KEYS else DEFAULT_SORT


def effective_filter(filter_key: str | None) -> str:
    return filter_key if filter_key in FILTERS else DEFAULT_FILTER


def scan_directory(namespace: Path, owner: str) -> list[FileDescriptor]:
    """Describe the regular files directly inside ``namespace``."""
    return [
        FileDescriptor.from_path(entry, owner)
        for entry in namespace.iterdir()
        if entry.is_file()
    ]


def filter_files(files: list[FileDescriptor], filter_key: str) -> list[FileDescriptor]:
    extensions = FILTERS.get(filter_key)
    if extensions is None:
        return list(files)
    return [f for f in files if f.extension in extensions]


def sort_files(files: list[FileDescriptor], sort: str) -> list[FileDescriptor]:
    # Name order first so that ties on the date keep ascending names;
    # sorted() stays stable with reverse=True.
    by_name = sorted(files, key=lambda f: f.name)
    if sort == "asc":
        return by_name
    if sort == "desc":
        return sorted(files, key=lambda f: f.name, reverse=True)
    if sort == "date_asc":
        return sorted(by_name, key=lambda f: f.created_at)
    return sorted(by_name, key=lambda f: f.created_at, reverse=True)


def list_files(
    namespace: Path,
    owner: str,
    sort: str | None = DEFAULT_SORT,
    filter_key: str | None = DEFAULT_FILTER,
) -> FileListing:
    """Scan, filter and sort a namespace.

    Unknown ``sort`` values fall back to newest first and unknown filters to
    no filtering; the returned listing carries the values actually applied.
    """
    sort = effective_sort(sort)
    filter_key = effective_filter(filter_key)

    files = scan_directory(namespace, owner)
    files = sort_files(filter_files(files, filter_key), sort)
    logger.debug(
        "Listed %d file(s) in %s (sort=%s, filter=%s)",
        len(files),
        namespace,
        sort,
        filter_key,
    )
    return FileListing(files=files, sort=sort, filter=filter_key)
