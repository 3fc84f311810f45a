"""Codec dispatch error types."""

from typing import Iterable, Optional


class CodecError(Exception):
    """Base class for codec dispatch errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        """Initialize error.

        Args:
            message: Error message
            details: Optional technical details
        """
        self.message = message
        self.details = details
        super().__init__(message)


class TypeMismatchError(CodecError, TypeError):
    """Input to encode or decode has the wrong type."""
    pass


class InvalidPrefixError(CodecError, ValueError):
    """Prefix is not a single character."""
    pass


class PrefixMismatchError(CodecError, ValueError):
    """Single decoder received text with a foreign prefix."""

    def __init__(self, name: str, prefix: str, text: str):
        """Initialize error.

        Args:
            name: Name of the decoder
            prefix: Prefix the decoder expects
            text: Offending input
        """
        super().__init__(
            f'{name} expects input starting with {prefix} and can not decode "{text}"'
        )
        self.name = name
        self.prefix = prefix
        self.text = text


class UnsupportedPrefixError(CodecError, LookupError):
    """Composed decoder has no decoder for the input's prefix."""

    def __init__(self, text: str, prefixes: Iterable[str]):
        """Initialize error.

        Args:
            text: Offending input
            prefixes: Prefixes the composed decoder supports
        """
        self.text = text
        self.prefixes = tuple(sorted(prefixes))
        super().__init__(
            f"Unable to decode multibase string {text!r}, only inputs prefixed "
            f"with {','.join(self.prefixes)} are supported"
        )


class AlphabetViolationError(CodecError, ValueError):
    """Text contains a character outside the codec's alphabet."""

    def __init__(self, name: str, character: str, position: int):
        """Initialize error.

        Args:
            name: Name of the codec
            character: First character not in the alphabet
            position: Index of that character in the text
        """
        super().__init__(
            f"invalid {name} character",
            f"{character!r} at position {position}"
        )
        self.name = name
        self.character = character
        self.position = position


class DuplicatePrefixError(CodecError, ValueError):
    """Two different decoders share a prefix under the reject policy."""

    def __init__(self, prefix: str, existing: str, incoming: str):
        """Initialize error.

        Args:
            prefix: Shared prefix
            existing: Name of the decoder already registered
            incoming: Name of the decoder being added
        """
        super().__init__(
            f"Prefix {prefix!r} is already registered for {existing}, "
            f"can not add {incoming}"
        )
        self.prefix = prefix
        self.existing = existing
        self.incoming = incoming
