from src.amiibo.document import convert_dump, create_nfc_content

HEADER = """Filetype: Flipper NFC device
Version: 2
# Nfc device type can be UID, Mifare Ultralight, Bank card
Device type: NTAG215
# UID, ATQA and SAK are common for all formats
UID: {uid}
ATQA: 44 00
SAK: 00
# Mifare Ultralight specific data
Signature: """ + " ".join(["00"] * 32) + """
Mifare version: 00 04 04 02 01 00 11 03
Counter 0: 0
Tearing 0: 00
Counter 1: 0
Tearing 1: 00
Counter 2: 0
Tearing 2: 00
Pages total: 135
"""


def test_create_nfc_content_header():
    content = create_nfc_content("04 11 22 44 55 66 77", "Page 0: 00 00 00 00")
    assert content == HEADER.format(uid="04 11 22 44 55 66 77") + "Page 0: 00 00 00 00"


def test_all_zero_dump():
    lines = convert_dump(bytes(540)).split("\n")

    assert "UID: 00 00 00 00 00 00 00" in lines
    page_lines = [line for line in lines if line.startswith("Page ")]
    assert len(page_lines) == 135
    for index in range(133):
        assert page_lines[index] == f"Page {index}: 00 00 00 00"
    assert page_lines[133] == "Page 133: AA 55 AA 55"
    assert page_lines[134] == "Page 134: 80 80 00 00"


def test_empty_dump_matches_all_zero_dump():
    assert convert_dump(b"") == convert_dump(bytes(540))


def test_uid_and_password_from_dump():
    dump = bytes([0x04, 0x11, 0x22, 0x9d, 0x33, 0x44, 0x55, 0x66]) + b"\xff" * 532
    content = convert_dump(dump)

    assert content.startswith(HEADER.format(uid="04 11 22 33 44 55 66"))
    assert "Page 0: 04 11 22 9D" in content
    assert "Page 1: 33 44 55 66" in content
    assert "Page 132: FF FF FF FF" in content
    assert "Page 133: 88 33 CC 77" in content
    assert content.endswith("Page 134: 80 80 00 00")


def test_header_does_not_depend_on_dump():
    content = convert_dump(b"\xff" * 572)
    assert content.startswith(HEADER.format(uid="FF FF FF FF FF FF FF"))
    assert "Page 135" not in content
