"""Type definitions for codec construction and composition."""

import copy
from enum import Enum
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .errors import AlphabetViolationError
from .utils.validation import validate_prefix


class DecoderKind(Enum):
    """Discriminant for the single / composed decoder union."""

    SINGLE = "single"
    COMPOSED = "composed"


class DuplicatePrefixPolicy(str, Enum):
    """What composition does when two decoders share a prefix.

    Attributes:
        REPLACE: The decoder registered last wins
        REJECT: Composition fails with DuplicatePrefixError
    """

    REPLACE = "replace"
    REJECT = "reject"

    @classmethod
    def strictest(cls, *policies: "DuplicatePrefixPolicy") -> "DuplicatePrefixPolicy":
        """Return REJECT if any policy rejects, otherwise REPLACE."""
        if cls.REJECT in policies:
            return cls.REJECT
        return cls.REPLACE


class CodecOptions(BaseModel):
    """Configuration record for a codec built from plain raw functions."""

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        validate_default=True,
        frozen=True
    )

    name: str = Field(min_length=1, description="Encoding name, e.g. 'base58btc'")
    prefix: str = Field(description="Single character multibase prefix")
    encode: Callable[..., str] = Field(description="Raw encode function")
    decode: Callable[..., bytes] = Field(description="Raw decode function")

    @field_validator("prefix")
    @classmethod
    def _check_prefix(cls, value: str) -> str:
        return validate_prefix(value)

    def base_encode(self, data: bytes) -> str:
        """Encode without prefix."""
        return self.encode(data)

    def base_decode(self, text: str) -> bytes:
        """Decode text that has already had its prefix stripped."""
        return self.decode(text)


class SettingsCodecOptions(CodecOptions):
    """Configuration record binding a fixed settings value to the raw functions.

    The settings value (a padding flag, a case mode, ...) is passed through
    as the second argument of every raw encode and decode call. It is
    deep-copied on construction so later changes to the caller's object do
    not reach the codec.
    """

    settings: Any = Field(description="Value passed to every raw call")

    @field_validator("settings")
    @classmethod
    def _copy_settings(cls, value: Any) -> Any:
        return copy.deepcopy(value)

    def base_encode(self, data: bytes) -> str:
        return self.encode(data, self.settings)

    def base_decode(self, text: str) -> bytes:
        return self.decode(text, self.settings)


class AlphabetCodecOptions(CodecOptions):
    """Configuration record binding an alphabet to the raw functions.

    Decoding checks every character against the alphabet before the raw
    decoder runs, since some raw decoders wrap or truncate on foreign input
    instead of failing.
    """

    alphabet: str = Field(min_length=1, description="Digit alphabet")

    def base_encode(self, data: bytes) -> str:
        return self.encode(data, self.alphabet)

    def base_decode(self, text: str) -> bytes:
        self.check_alphabet(text)
        return self.decode(text, self.alphabet)

    def check_alphabet(self, text: str) -> None:
        """Check that every character of text is in the alphabet.

        Args:
            text: Text without prefix

        Raises:
            AlphabetViolationError: At the first character not in the alphabet
        """
        for position, character in enumerate(text):
            if character not in self.alphabet:
                raise AlphabetViolationError(self.name, character, position)
