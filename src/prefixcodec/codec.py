"""Paired multibase encoder and decoder."""

from typing import Any, Callable

from .decoder import ComposedDecoder, Decoder
from .encoder import Encoder
from .utils.validation import BinaryLike


class Codec:
    """Encoder and decoder for one base encoding.

    Usable both as a multibase codec (``encode``/``decode`` with prefix) and
    as a plain base codec (``base_encode``/``base_decode`` without prefix).

    Attributes:
        name: Encoding name
        prefix: Single character multibase prefix
        encoder: Encoder owned by this codec
        decoder: Decoder owned by this codec
    """

    def __init__(
        self,
        name: str,
        prefix: str,
        base_encode: Callable[[bytes], str],
        base_decode: Callable[[str], bytes]
    ):
        """Initialize codec.

        Args:
            name: Encoding name
            prefix: Single character multibase prefix
            base_encode: Raw encode function
            base_decode: Raw decode function

        Raises:
            InvalidPrefixError: If prefix is not a single character
        """
        self.encoder = Encoder(name, prefix, base_encode)
        self.decoder = Decoder(name, prefix, base_decode)

    @property
    def name(self) -> str:
        return self.encoder.name

    @property
    def prefix(self) -> str:
        return self.encoder.prefix

    @property
    def base_encode(self) -> Callable[[bytes], str]:
        return self.encoder.base_encode

    @property
    def base_decode(self) -> Callable[[str], bytes]:
        return self.decoder.base_decode

    def encode(self, data: BinaryLike) -> str:
        return self.encoder.encode(data)

    def decode(self, text: str) -> bytes:
        return self.decoder.decode(text)

    def or_(self, other: Any) -> ComposedDecoder:
        """Compose this codec's decoder with another decoder or codec."""
        return self.decoder.or_(other)

    def __or__(self, other: Any) -> ComposedDecoder:
        return self.or_(other)

    def __repr__(self) -> str:
        return f"Codec(name={self.name!r}, prefix={self.prefix!r})"
