"""Base32 encoding per RFC 4648, section 6."""

from typing import Union

from .errors import DecodeError
from .history import record_decode_failure
from .tables import Octets, reverse_table, to_octets, to_text

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
PAD = "="
_REVERSE = reverse_table(ALPHABET, ignore_case=True)

# 8 symbols carry 40 bits, the smallest whole number of octets.
QUANTUM = 8


def encode(data: Union[str, Octets], encoding: str = "utf-8") -> str:
    """Encode octets as Base32, padding the output to a multiple of 8 with '='."""
    octets = to_octets(data, encoding)
    if not octets:
        return ""
    out = []
    group = 0
    group_size = 0
    for octet in octets:
        group = ((group << 8) | octet) & 0xFFF
        group_size += 8
        while group_size >= 5:
            group_size -= 5
            out.append(ALPHABET[(group >> group_size) & 0x1F])
    if group_size:
        out.append(ALPHABET[(group << (5 - group_size)) & 0x1F])
    out.append(PAD * (-len(out) % QUANTUM))
    return "".join(out)


def _decode(text: str) -> bytes:
    out = bytearray()
    group = 0
    group_size = 0
    for ch in text:
        if ch == PAD:
            break
        value = _REVERSE.get(ch)
        if value is None:
            continue
        group = ((group << 5) | value) & 0xFFF
        group_size += 5
        if group_size >= 8:
            group_size -= 8
            out.append((group >> group_size) & 0xFF)
    if group & ((1 << group_size) - 1):
        raise DecodeError("base32", "non-zero bits in final partial group")
    return bytes(out)


def decode(text: Union[str, bytes]) -> bytes:
    """
    Decode Base32 text case-insensitively.

    Scanning stops at the first '=' and anything after it is ignored, so
    missing padding is tolerated. Other characters outside the alphabet are
    skipped. Returns b"" when the leftover alignment bits are not all zero.
    """
    try:
        return _decode(to_text(text))
    except DecodeError as exc:
        record_decode_failure(exc)
        return b""
