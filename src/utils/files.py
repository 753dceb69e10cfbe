"""Dump discovery and NFC file input/output."""

import logging
from pathlib import Path
from typing import List, Union

from ..amiibo.constants import BIN_SUFFIX, NFC_SUFFIX
from ..amiibo.exceptions import DumpReadError, DumpWriteError

PathLike = Union[str, Path]


def find_dump_files(input_dir: PathLike, suffix: str = BIN_SUFFIX) -> List[Path]:
    """Recursively collect dump files under input_dir, sorted by path."""
    root = Path(input_dir)
    if not root.is_dir():
        raise DumpReadError(f"Input directory not found: {root}")

    files = sorted(p for p in root.rglob('*') if p.name.endswith(suffix) and p.is_file())
    logging.debug(f"Found {len(files)} '{suffix}' files in {root}")
    return files


def load_dump(path: PathLike) -> bytes:
    """Read raw dump bytes from path."""
    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError as e:
        raise DumpReadError(f"Failed to read dump {path}: {e}")


def output_path_for(path: PathLike, input_dir: PathLike, output_dir: PathLike,
                    suffix: str = NFC_SUFFIX) -> Path:
    """Mirror path from the input tree into the output tree with a new suffix.

    Args:
        path: Dump file located under input_dir
        input_dir: Root of the input tree
        output_dir: Root of the output tree
        suffix: Extension for the converted file

    Returns:
        Path: output_dir / <path relative to input_dir> with suffix swapped
    """
    relative = Path(path).relative_to(Path(input_dir))
    return Path(output_dir) / relative.with_suffix(suffix)


def save_nfc_file(path: PathLike, content: str) -> None:
    """Write NFC file content, creating parent directories as needed."""
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            f.write(content)
    except OSError as e:
        raise DumpWriteError(f"Failed to write NFC file {path}: {e}")
