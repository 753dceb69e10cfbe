"""Flipper NFC document assembly."""

import logging

from .constants import FLIPPER_HEADER, NTAG215_PAGE_QUANTITY
from .dump import calculate_password, extract_uid, format_bytes, format_uid, normalize_dump
from .pages import format_pages, render_pages


def _counter_lines() -> str:
    lines = []
    for counter in range(FLIPPER_HEADER['counters']):
        lines.append(f"Counter {counter}: 0")
        lines.append(f"Tearing {counter}: 00")
    return "\n".join(lines)


def create_nfc_content(uid: str, pages: str) -> str:
    """Wrap the UID and rendered pages in a Flipper NFC device header."""
    return f"""Filetype: {FLIPPER_HEADER['filetype']}
Version: {FLIPPER_HEADER['version']}
# Nfc device type can be UID, Mifare Ultralight, Bank card
Device type: {FLIPPER_HEADER['device_type']}
# UID, ATQA and SAK are common for all formats
UID: {uid}
ATQA: {format_bytes(FLIPPER_HEADER['atqa'])}
SAK: {format_bytes(FLIPPER_HEADER['sak'])}
# Mifare Ultralight specific data
Signature: {format_bytes(FLIPPER_HEADER['signature'])}
Mifare version: {format_bytes(FLIPPER_HEADER['mifare_version'])}
{_counter_lines()}
Pages total: {NTAG215_PAGE_QUANTITY}
{pages}"""


def convert_dump(raw: bytes) -> str:
    """Convert raw dump bytes into Flipper NFC file content."""
    dump = normalize_dump(raw)
    uid = extract_uid(dump)
    password = calculate_password(uid)

    logging.debug(f"    UID:      {format_uid(uid)}")
    logging.debug(f"    Password: {format_bytes(password)}")

    pages = render_pages(dump, password)
    return create_nfc_content(format_uid(uid), format_pages(pages))
