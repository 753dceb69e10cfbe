"""NTAG215 layout and Flipper NFC format constants."""

# NTAG215 memory: 135 pages (0 to 134) of 4 bytes each
PAGE_SIZE = 4
NTAG215_PAGE_QUANTITY = 135
NTAG215_DUMP_SIZE = NTAG215_PAGE_QUANTITY * PAGE_SIZE

# UID is serial bytes SN0-SN2 (page 0) and SN3-SN6 (page 1), BCC0 at offset 3 is skipped
UID_LAYOUT = {
    'head': (0, 3),
    'tail': (4, 8),
    'length': 7,
}

# Default password derivation from the NTAG215 data sheet
PASSWORD_LENGTH = 4
PASSWORD_FORMULA = [
    # (uid index, uid index, mask)
    (1, 3, 0xAA),
    (2, 4, 0x55),
    (3, 5, 0xAA),
    (4, 6, 0x55),
]

# Trailer pages overwritten on every conversion
PASSWORD_PAGE = 133
CONFIG_PAGE = 134
CONFIG_PAGE_BYTES = bytes([0x80, 0x80, 0x00, 0x00])

# Flipper NFC device header
FLIPPER_HEADER = {
    'filetype': 'Flipper NFC device',
    'version': 2,
    'device_type': 'NTAG215',
    'atqa': bytes([0x44, 0x00]),
    'sak': bytes([0x00]),
    'signature': bytes(32),
    'mifare_version': bytes([0x00, 0x04, 0x04, 0x02, 0x01, 0x00, 0x11, 0x03]),
    'counters': 3,
}

# File handling
BIN_SUFFIX = '.bin'
NFC_SUFFIX = '.nfc'
DEFAULT_INPUT_DIR = 'Amiibo Bins'
DEFAULT_OUTPUT_DIR = 'output'
