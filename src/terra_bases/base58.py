"""
Base58 encoding with the Bitcoin alphabet.

The whole input is one big-endian number, so conversion is long division by
58 (encode) and multiply-accumulate by 58 (decode) over digit buffers kept in
little-endian order. Each leading zero octet is written as a leading '1'.

The encode buffer is sized from encoded_length_bound(), so its OverflowError
is a sizing guard that correct input can never trigger.
"""

import math
import string
from typing import Union

from .errors import DecodeError
from .history import record_decode_failure
from .tables import Octets, reverse_table, to_octets, to_text

ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
ZERO = ALPHABET[0]
WHITESPACE = frozenset(string.whitespace)
_REVERSE = reverse_table(ALPHABET)

_EXPANSION = math.log(256) / math.log(58)


def encoded_length_bound(length: int) -> int:
    """Upper bound on the number of base-58 digits for `length` octets."""
    return math.ceil(length * _EXPANSION) + 1


def encode(data: Union[str, Octets], encoding: str = "utf-8") -> str:
    """Encode octets as Base58, keeping leading zero octets as '1' characters."""
    octets = to_octets(data, encoding)
    if not octets:
        return ""
    zeros = len(octets) - len(octets.lstrip(b"\x00"))
    capacity = encoded_length_bound(len(octets) - zeros)
    digits = bytearray(capacity)
    used = 0
    for octet in octets[zeros:]:
        carry = octet
        j = 0
        while j < used or carry:
            if j == capacity:
                raise OverflowError("base58 digit buffer too small")
            carry += digits[j] << 8
            digits[j] = carry % 58
            carry //= 58
            j += 1
        used = j
    body = "".join(ALPHABET[d] for d in reversed(digits[:used]))
    return ZERO * zeros + body


def _decode(text: str) -> bytes:
    zeros = 0
    start = 0
    for ch in text:
        if ch == ZERO:
            zeros += 1
        elif ch not in WHITESPACE:
            break
        start += 1

    capacity = len(text)
    octets = bytearray(capacity)
    used = 0
    for position in range(start, len(text)):
        ch = text[position]
        if ch in WHITESPACE:
            continue
        carry = _REVERSE.get(ch)
        if carry is None:
            raise DecodeError("base58", f"invalid character {ch!r}", position)
        j = 0
        while j < used or carry:
            if j == capacity:
                raise DecodeError("base58", "value exceeds octet buffer", position)
            carry += 58 * octets[j]
            octets[j] = carry & 0xFF
            carry >>= 8
            j += 1
        used = j
    return bytes(zeros) + bytes(reversed(octets[:used]))


def decode(text: Union[str, bytes]) -> bytes:
    """
    Decode Base58 text, ignoring whitespace anywhere in the input.

    The alphabet is case-sensitive. Returns b"" if any other character falls
    outside the alphabet.
    """
    try:
        return _decode(to_text(text))
    except DecodeError as exc:
        record_decode_failure(exc)
        return b""
