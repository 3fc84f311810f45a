"""Factories for building codecs from raw base functions."""

from typing import Any, Callable

from loguru import logger

from .codec import Codec
from .types import AlphabetCodecOptions, CodecOptions, SettingsCodecOptions


def from_options(options: CodecOptions) -> Codec:
    """Create a codec from a configuration record.

    The record is captured by the codec: its raw functions are called
    through the record's ``base_encode``/``base_decode``, so a settings value
    or alphabet is fixed at build time.

    Args:
        options: CodecOptions, SettingsCodecOptions or AlphabetCodecOptions

    Returns:
        New codec

    Raises:
        TypeError: If options is not a codec options record
    """
    if not isinstance(options, CodecOptions):
        raise TypeError(f"Expected codec options, got {type(options).__name__}")
    codec = Codec(options.name, options.prefix, options.base_encode, options.base_decode)
    logger.debug(f"Created {type(options).__name__} codec {options.name} ({options.prefix})")
    return codec


def from_base(
    *,
    name: str,
    prefix: str,
    encode: Callable[[bytes], str],
    decode: Callable[[str], bytes]
) -> Codec:
    """Create a codec from a raw encode/decode pair.

    Args:
        name: Encoding name
        prefix: Single character multibase prefix
        encode: Raw encode function
        decode: Raw decode function

    Returns:
        New codec

    Raises:
        pydantic.ValidationError: If the configuration is invalid
    """
    return from_options(CodecOptions(name=name, prefix=prefix, encode=encode, decode=decode))


def with_settings(
    *,
    name: str,
    prefix: str,
    settings: Any,
    encode: Callable[[bytes, Any], str],
    decode: Callable[[str, Any], bytes]
) -> Codec:
    """Create a codec whose raw functions always receive ``settings``.

    Args:
        name: Encoding name
        prefix: Single character multibase prefix
        settings: Value passed as second argument to every raw call
        encode: Raw encode function taking (data, settings)
        decode: Raw decode function taking (text, settings)

    Returns:
        New codec

    Raises:
        pydantic.ValidationError: If the configuration is invalid
    """
    return from_options(SettingsCodecOptions(
        name=name,
        prefix=prefix,
        settings=settings,
        encode=encode,
        decode=decode
    ))


def with_alphabet(
    *,
    name: str,
    prefix: str,
    alphabet: str,
    encode: Callable[[bytes, str], str],
    decode: Callable[[str, str], bytes]
) -> Codec:
    """Create a codec bound to an alphabet.

    Decoding rejects any character outside the alphabet before the raw
    decoder is called.

    Args:
        name: Encoding name
        prefix: Single character multibase prefix
        alphabet: Digit alphabet passed to every raw call
        encode: Raw encode function taking (data, alphabet)
        decode: Raw decode function taking (text, alphabet)

    Returns:
        New codec

    Raises:
        pydantic.ValidationError: If the configuration is invalid
    """
    return from_options(AlphabetCodecOptions(
        name=name,
        prefix=prefix,
        alphabet=alphabet,
        encode=encode,
        decode=decode
    ))
