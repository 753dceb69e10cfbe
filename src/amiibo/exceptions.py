"""Amiibo conversion exceptions."""


class AmiiboError(Exception):
    """Base class for conversion exceptions."""
    pass


class DumpReadError(AmiiboError):
    """Failed to read a dump file."""
    pass


class DumpWriteError(AmiiboError):
    """Failed to write an NFC file."""
    pass


class MalformedDumpError(AmiiboError):
    """Dump bytes do not fit the NTAG215 layout."""
    pass
