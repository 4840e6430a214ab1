from typing import Dict, Iterable, Union

Octets = Union[bytes, bytearray, memoryview, Iterable[int]]


def reverse_table(alphabet: str, ignore_case: bool = False) -> Dict[str, int]:
    """
    Build the character -> digit lookup for an alphabet.

    Characters missing from the mapping are invalid for the codec. With
    `ignore_case`, the other-case form of every letter maps to the same digit.
    """
    table: Dict[str, int] = {}
    for value, char in enumerate(alphabet):
        table[char] = value
        if ignore_case and char.isalpha():
            table.setdefault(char.swapcase(), value)
    return table


def to_octets(data: Union[str, Octets], encoding: str = "utf-8") -> bytes:
    """Normalise encoder input to bytes; text is encoded with `encoding`."""
    if isinstance(data, str):
        return data.encode(encoding)
    if isinstance(data, (bytes, bytearray, memoryview)):
        return bytes(data)
    if isinstance(data, int):
        raise TypeError("Cannot encode object of type int")
    try:
        return bytes(data)
    except (TypeError, ValueError) as exc:
        raise TypeError(f"Cannot encode object of type {type(data).__name__}") from exc


def to_text(text: Union[str, bytes, bytearray, memoryview]) -> str:
    """Normalise decoder input to str; each octet becomes one character."""
    if isinstance(text, str):
        return text
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text).decode("latin-1")
    raise TypeError(f"Cannot decode object of type {type(text).__name__}")
