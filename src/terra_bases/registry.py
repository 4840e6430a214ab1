from typing import Callable, Dict, Tuple, Union

from . import base16, base32, base45, base58, base64
from .tables import Octets

BaseCodec = Tuple[Callable[..., str], Callable[[Union[str, bytes]], bytes]]


def registry() -> Dict[str, BaseCodec]:
    return {
        "base16": (base16.encode, base16.decode),
        "base32": (base32.encode, base32.decode),
        "base45": (base45.encode, base45.decode),
        "base58": (base58.encode, base58.decode),
        "base64": (base64.encode, base64.decode),
    }


def get_codec(name: str) -> BaseCodec:
    codecs = registry()
    key = name.strip().lower()
    if key not in codecs:
        raise ValueError(f"Unsupported base type: {name}")
    return codecs[key]


def encode(name: str, data: Union[str, Octets], encoding: str = "utf-8") -> str:
    """Encode `data` with the codec registered under `name`."""
    enc, _ = get_codec(name)
    return enc(data, encoding)


def decode(name: str, text: Union[str, bytes]) -> bytes:
    """Decode `text` with the codec registered under `name`; b"" on malformed input."""
    _, dec = get_codec(name)
    return dec(text)
