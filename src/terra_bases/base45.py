"""Base45 encoding per RFC 9285."""

from typing import Union

from .errors import DecodeError
from .history import record_decode_failure
from .tables import Octets, reverse_table, to_octets, to_text

ALPHABET = "0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ $%*+-./:"
_REVERSE = reverse_table(ALPHABET)


def encode(data: Union[str, Octets], encoding: str = "utf-8") -> str:
    """
    Encode octets as Base45.

    Each pair of octets becomes three symbols, least significant digit first;
    a trailing single octet becomes two symbols.
    """
    octets = to_octets(data, encoding)
    out = []
    for i in range(0, len(octets) - 1, 2):
        value = (octets[i] << 8) | octets[i + 1]
        out.append(ALPHABET[value % 45])
        out.append(ALPHABET[(value // 45) % 45])
        out.append(ALPHABET[(value // 2025) % 45])
    if len(octets) % 2:
        value = octets[-1]
        out.append(ALPHABET[value % 45])
        out.append(ALPHABET[(value // 45) % 45])
    return "".join(out)


def _decode(text: str) -> bytes:
    out = bytearray()
    digits = []
    for ch in text:
        value = _REVERSE.get(ch)
        if value is None:
            continue
        digits.append(value)
        if len(digits) == 3:
            pair = digits[0] + digits[1] * 45 + digits[2] * 2025
            out.append((pair >> 8) & 0xFF)
            out.append(pair & 0xFF)
            digits = []
    if digits:
        if len(digits) != 2:
            raise DecodeError("base45", "dangling single symbol")
        out.append((digits[0] + digits[1] * 45) & 0xFF)
    return bytes(out)


def decode(text: Union[str, bytes]) -> bytes:
    """
    Decode Base45 text. The alphabet is case-sensitive, so lowercase letters
    are skipped along with every other non-alphabet character.
    """
    try:
        return _decode(to_text(text))
    except DecodeError as exc:
        record_decode_failure(exc)
        return b""
