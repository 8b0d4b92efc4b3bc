"""Encoding of filesystem paths into cache file names."""

import os
from typing import Union

_SLASH = ord("/")
_SPACE = ord(" ")
_TILDE = ord("~")


def encode_path(path: Union[str, bytes]) -> str:
    """
    Encode a filesystem path into a single, safe file name component.

    Printable ASCII other than '/' passes through unchanged. '/', control
    characters, space and bytes above 0x7E become '%XX' with uppercase hex.
    The output never contains '/', NUL or whitespace. The mapping is one-way.

    Args:
        path: Path as str (encoded with the filesystem encoding) or bytes

    Returns:
        The encoded name

    Example:
        >>> encode_path("/mnt/usb disk")
        '%2Fmnt%2Fusb%20disk'
    """
    raw = os.fsencode(path)
    out = []
    for byte in raw:
        if byte == _SLASH or byte <= _SPACE or byte > _TILDE:
            out.append("%%%02X" % byte)
        else:
            out.append(chr(byte))
    return "".join(out)
