"""
MIME Lookup
===========
Content-Type detection for uploaded objects.
"""

import mimetypes
from typing import Callable, Optional

ContentTypeLookup = Callable[[str], Optional[str]]

# Compressed names are typed by their compression, not by what they contain
ENCODING_TYPES = {
    "gzip": "application/gzip",
    "bzip2": "application/x-bzip2",
    "xz": "application/x-xz",
    "br": "application/x-brotli",
    "compress": "application/x-compress",
}


def content_type_for(filename: str) -> Optional[str]:
    """Guess a Content-Type from an object name, None if unknown."""
    content_type, encoding = mimetypes.guess_type(filename, strict=False)
    if encoding is not None:
        return ENCODING_TYPES.get(encoding, content_type)
    return content_type
