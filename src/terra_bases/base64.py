"""Base64 encoding per RFC 4648, section 4."""

from typing import Union

from .tables import Octets, reverse_table, to_octets, to_text

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
PAD = "="
_REVERSE = reverse_table(ALPHABET)


def encode(data: Union[str, Octets], encoding: str = "utf-8") -> str:
    """Encode octets as Base64 with '=' padding."""
    octets = to_octets(data, encoding)
    out = []
    full = len(octets) - len(octets) % 3
    for i in range(0, full, 3):
        group = (octets[i] << 16) | (octets[i + 1] << 8) | octets[i + 2]
        out.append(ALPHABET[(group >> 18) & 0x3F])
        out.append(ALPHABET[(group >> 12) & 0x3F])
        out.append(ALPHABET[(group >> 6) & 0x3F])
        out.append(ALPHABET[group & 0x3F])
    tail = octets[full:]
    if tail:
        group = int.from_bytes(tail.ljust(3, b"\x00"), "big")
        out.append(ALPHABET[(group >> 18) & 0x3F])
        out.append(ALPHABET[(group >> 12) & 0x3F])
        if len(tail) == 1:
            out.append(PAD * 2)
        else:
            out.append(ALPHABET[(group >> 6) & 0x3F])
            out.append(PAD)
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
        group = (group << 6) | value
        group_size += 6
        if group_size == 24:
            out += group.to_bytes(3, "big")
            group = 0
            group_size = 0
    if group_size:
        # Residual bits are zero-extended, never checked.
        group <<= 24 - group_size
        out.append((group >> 16) & 0xFF)
        if group_size >= 16:
            out.append((group >> 8) & 0xFF)
    return bytes(out)


def decode(text: Union[str, bytes]) -> bytes:
    """
    Decode Base64 text.

    Scanning stops at the first '=' (missing padding is fine) and characters
    outside the alphabet, such as line breaks, are skipped. A partial final
    group is zero-extended; its unused bits are not required to be zero.
    """
    return _decode(to_text(text))
