"""Prefixing encoder."""

from dataclasses import dataclass
from typing import Callable

from .utils.validation import BinaryLike, validate_binary, validate_prefix


@dataclass(frozen=True)
class Encoder:
    """Encodes bytes to multibase text.

    Can also be used to base encode without the multibase prefix through
    ``base_encode``.

    Attributes:
        name: Encoding name
        prefix: Single character prepended to every output
        base_encode: Raw encode function, bytes to text
    """
    name: str
    prefix: str
    base_encode: Callable[[bytes], str]

    def __post_init__(self):
        """Validate prefix."""
        validate_prefix(self.prefix)

    def encode(self, data: BinaryLike) -> str:
        """Encode bytes and prepend the prefix.

        Args:
            data: Binary buffer to encode

        Returns:
            Prefixed text

        Raises:
            TypeMismatchError: If data is not a binary buffer
        """
        data = validate_binary(data)
        return f"{self.prefix}{self.base_encode(data)}"
