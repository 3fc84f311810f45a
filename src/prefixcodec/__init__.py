"""Self-describing multibase encoding dispatch."""

from loguru import logger

from .codec import Codec
from .config import DispatchConfig, reset_logging
from .decoder import AnyDecoder, ComposedDecoder, Decoder
from .encoder import Encoder
from .errors import (
    AlphabetViolationError,
    CodecError,
    DuplicatePrefixError,
    InvalidPrefixError,
    PrefixMismatchError,
    TypeMismatchError,
    UnsupportedPrefixError,
)
from .factory import from_base, from_options, with_alphabet, with_settings
from .types import (
    AlphabetCodecOptions,
    CodecOptions,
    DecoderKind,
    DuplicatePrefixPolicy,
    SettingsCodecOptions,
)

__version__ = "0.1.0"

# Silent until DispatchConfig.configure_logging() is called
logger.disable("prefixcodec")

__all__ = [
    "Encoder",
    "Decoder",
    "ComposedDecoder",
    "AnyDecoder",
    "DecoderKind",
    "Codec",
    "from_base",
    "from_options",
    "with_settings",
    "with_alphabet",
    "CodecOptions",
    "SettingsCodecOptions",
    "AlphabetCodecOptions",
    "DuplicatePrefixPolicy",
    "DispatchConfig",
    "reset_logging",
    "CodecError",
    "TypeMismatchError",
    "InvalidPrefixError",
    "PrefixMismatchError",
    "UnsupportedPrefixError",
    "AlphabetViolationError",
    "DuplicatePrefixError",
]
