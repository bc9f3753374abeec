# document_renamer/Z_utils/Z01_filename_utils.py
"""
File name helpers for the rename runner.

A trailing extension is only split off when it is a known document
extension, so dotted dates ("01.15.2025 appt notice") and abbreviations
("Dr. Smith") are never mistaken for one.

Key Components:
    - split_extension: Split "stem.ext" into (stem, ".ext")
    - KNOWN_EXTENSIONS: Extensions recognised by split_extension
"""
from __future__ import annotations

import re
from typing import FrozenSet, Iterable, Optional, Tuple

KNOWN_EXTENSIONS: FrozenSet[str] = frozenset({
    # Documents
    "pdf", "doc", "docx", "rtf", "txt", "odt", "wpd", "pages",
    # Mail
    "msg", "eml",
    # Spreadsheets
    "xls", "xlsx", "csv",
    # Images
    "jpg", "jpeg", "png", "gif", "bmp", "tif", "tiff", "heic",
    # Web / archives
    "htm", "html", "xml", "zip",
    # Audio / video
    "mp3", "mp4", "m4a", "wav", "mov",
})

_EXTENSION_RE = re.compile(r"\.([A-Za-z0-9]{1,5})$")


def split_extension(
    filename: str,
    extensions: Optional[Iterable[str]] = None,
) -> Tuple[str, str]:
    """
    Split a file name into stem and extension.

    Args:
        filename: File name without directories
        extensions: Allowed extensions (no dot, case-insensitive);
            defaults to KNOWN_EXTENSIONS

    Returns:
        (stem, extension) where extension keeps its dot and original case,
        or is "" when no known extension is present

    Examples:
        >>> split_extension("4-2-24 QME report.PDF")
        ('4-2-24 QME report', '.PDF')
        >>> split_extension("01.15.2025 appt notice")
        ('01.15.2025 appt notice', '')
    """
    allowed = KNOWN_EXTENSIONS if extensions is None else frozenset(e.lower().lstrip(".") for e in extensions)
    match = _EXTENSION_RE.search(filename)
    if match and match.group(1).lower() in allowed and match.start() > 0:
        return filename[: match.start()], filename[match.start():]
    return filename, ""


__all__ = [
    "KNOWN_EXTENSIONS",
    "split_extension",
]
