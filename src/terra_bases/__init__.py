from . import base16, base32, base45, base58, base64
from .config import BasesConfig, load_config, save_config
from .errors import DecodeError
from .registry import decode, encode, get_codec, registry

__all__ = [
    "base16",
    "base32",
    "base45",
    "base58",
    "base64",
    "BasesConfig",
    "load_config",
    "save_config",
    "DecodeError",
    "decode",
    "encode",
    "get_codec",
    "registry",
]
