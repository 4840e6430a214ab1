from typing import Optional


class DecodeError(ValueError):
    """Raised inside a codec when its input cannot be decoded."""

    def __init__(self, codec: str, reason: str, position: Optional[int] = None) -> None:
        self.codec = codec
        self.reason = reason
        self.position = position
        where = f" at offset {position}" if position is not None else ""
        super().__init__(f"{codec}: {reason}{where}")
