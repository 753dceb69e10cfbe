"""Page rendering for NTAG215 dumps."""

from dataclasses import dataclass
from typing import List

from .constants import (
    CONFIG_PAGE, CONFIG_PAGE_BYTES, NTAG215_DUMP_SIZE,
    NTAG215_PAGE_QUANTITY, PAGE_SIZE, PASSWORD_LENGTH, PASSWORD_PAGE
)
from .dump import format_bytes
from .exceptions import MalformedDumpError


@dataclass(frozen=True)
class Page:
    """Single 4 byte page of tag memory."""
    index: int
    data: bytes

    def __post_init__(self):
        if not 0 <= self.index < NTAG215_PAGE_QUANTITY:
            raise MalformedDumpError(f"Page index out of range: {self.index}")
        if len(self.data) != PAGE_SIZE:
            raise MalformedDumpError(f"Page {self.index} must be {PAGE_SIZE} bytes, got {len(self.data)}")

    def to_line(self) -> str:
        return f"Page {self.index}: {format_bytes(self.data)}"


def render_pages(dump: bytes, password: bytes) -> List[Page]:
    """Split a normalized dump into pages.

    The password page and the configuration page are always replaced,
    whatever the dump holds at those offsets.
    """
    if len(dump) != NTAG215_DUMP_SIZE:
        raise MalformedDumpError(f"Dump must be normalized to {NTAG215_DUMP_SIZE} bytes, got {len(dump)}")
    if len(password) != PASSWORD_LENGTH:
        raise MalformedDumpError(f"Password must be {PASSWORD_LENGTH} bytes, got {len(password)}")

    pages = []
    for index in range(NTAG215_PAGE_QUANTITY):
        if index == PASSWORD_PAGE:
            data = password
        elif index == CONFIG_PAGE:
            data = CONFIG_PAGE_BYTES
        else:
            offset = index * PAGE_SIZE
            data = dump[offset:offset + PAGE_SIZE]
        pages.append(Page(index, bytes(data)))

    return pages


def format_pages(pages: List[Page]) -> str:
    """Render pages as newline separated lines in index order."""
    return "\n".join(page.to_line() for page in sorted(pages, key=lambda p: p.index))
