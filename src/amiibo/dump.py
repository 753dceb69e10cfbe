"""NTAG215 dump normalization, UID and password derivation."""

import logging

from smartcard.util import toHexString

from .constants import (
    NTAG215_DUMP_SIZE, NTAG215_PAGE_QUANTITY, PAGE_SIZE,
    PASSWORD_FORMULA, UID_LAYOUT
)
from .exceptions import MalformedDumpError


def normalize_dump(raw: bytes) -> bytes:
    """Pad or truncate a raw dump to exactly 135 pages of 4 bytes.

    Odd-sized input is padded with zero bytes up to the next full page,
    missing pages are zero-filled and anything past page 134 is dropped.
    """
    remainder = len(raw) % PAGE_SIZE
    if remainder:
        logging.debug(f"Dump size {len(raw)} is not page aligned, padding {PAGE_SIZE - remainder} bytes")

    if len(raw) > NTAG215_DUMP_SIZE:
        logging.debug(f"Dump size {len(raw)} exceeds {NTAG215_PAGE_QUANTITY} pages, "
                      f"ignoring {len(raw) - NTAG215_DUMP_SIZE} bytes")
    elif len(raw) < NTAG215_DUMP_SIZE:
        logging.debug(f"Dump size {len(raw)} is short, zero-filling to {NTAG215_DUMP_SIZE} bytes")

    normalized = bytearray(NTAG215_DUMP_SIZE)
    kept = raw[:NTAG215_DUMP_SIZE]
    normalized[:len(kept)] = kept
    return bytes(normalized)


def extract_uid(dump: bytes) -> bytes:
    """Extract the 7 byte UID from the first two pages, skipping BCC0."""
    head_start, head_end = UID_LAYOUT['head']
    tail_start, tail_end = UID_LAYOUT['tail']
    if len(dump) < tail_end:
        raise MalformedDumpError(f"Dump too short for UID: need {tail_end} bytes, got {len(dump)}")

    return bytes(dump[head_start:head_end]) + bytes(dump[tail_start:tail_end])


def calculate_password(uid: bytes) -> bytes:
    """Calculate the NTAG215 default password from a 7 byte UID."""
    if len(uid) != UID_LAYOUT['length']:
        raise MalformedDumpError(f"UID must be {UID_LAYOUT['length']} bytes, got {len(uid)}")

    password = bytes(uid[a] ^ uid[b] ^ mask for a, b, mask in PASSWORD_FORMULA)
    return password


def format_bytes(data: bytes) -> str:
    """Format bytes as space separated uppercase hex pairs."""
    return toHexString(list(data))


def format_uid(uid: bytes) -> str:
    """Format a UID the way it appears in the NFC file header."""
    return format_bytes(uid)
