"""Base16 (hex) encoding per RFC 4648, section 8."""

from typing import Union

from .errors import DecodeError
from .history import record_decode_failure
from .tables import Octets, reverse_table, to_octets, to_text

ALPHABET = "0123456789ABCDEF"
_REVERSE = reverse_table(ALPHABET, ignore_case=True)


def encode(data: Union[str, Octets], encoding: str = "utf-8") -> str:
    """Encode octets as upper-case Base16, two characters per octet."""
    octets = to_octets(data, encoding)
    out = []
    for octet in octets:
        out.append(ALPHABET[octet >> 4])
        out.append(ALPHABET[octet & 0x0F])
    return "".join(out)


def _decode(text: str) -> bytes:
    out = bytearray()
    group = 0
    group_size = 0
    for ch in text:
        value = _REVERSE.get(ch)
        if value is None:
            continue
        group = (group << 4) | value
        group_size += 4
        if group_size == 8:
            out.append(group & 0xFF)
            group = 0
            group_size = 0
    if group_size:
        raise DecodeError("base16", "odd number of hex digits")
    return bytes(out)


def decode(text: Union[str, bytes]) -> bytes:
    """
    Decode Base16 text, ignoring any character outside 0-9, A-F and a-f.

    Returns b"" for empty input or when an odd number of hex digits is found.
    """
    try:
        return _decode(to_text(text))
    except DecodeError as exc:
        record_decode_failure(exc)
        return b""
