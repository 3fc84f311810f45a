"""Input validation utilities."""

from typing import Union

from ..errors import InvalidPrefixError, TypeMismatchError

BinaryLike = Union[bytes, bytearray, memoryview]


def validate_prefix(prefix: str) -> str:
    """Validate that a prefix is exactly one character.

    Args:
        prefix: Prefix to validate

    Returns:
        The prefix

    Raises:
        InvalidPrefixError: If prefix is not a one-character string
    """
    if not isinstance(prefix, str) or len(prefix) != 1:
        raise InvalidPrefixError(f"Prefix must be a single character, got {prefix!r}")
    return prefix


def validate_binary(data: BinaryLike) -> bytes:
    """Validate that data is a binary buffer and copy it.

    Args:
        data: Buffer to validate

    Returns:
        An immutable copy of the buffer

    Raises:
        TypeMismatchError: If data is not bytes, bytearray or memoryview
    """
    if not isinstance(data, (bytes, bytearray, memoryview)):
        raise TypeMismatchError(
            "Unknown type, must be binary type",
            f"got {type(data).__name__}"
        )
    return bytes(data)


def validate_text(text: str) -> str:
    """Validate that text is a string.

    Args:
        text: Value to validate

    Returns:
        The text

    Raises:
        TypeMismatchError: If text is not a str
    """
    if not isinstance(text, str):
        raise TypeMismatchError(
            "Can only multibase decode strings",
            f"got {type(text).__name__}"
        )
    return text
