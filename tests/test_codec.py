"""Tests for the paired codec."""

from unittest.mock import Mock

import pytest

from prefixcodec.codec import Codec
from prefixcodec.decoder import ComposedDecoder, Decoder
from prefixcodec.encoder import Encoder
from prefixcodec.errors import InvalidPrefixError, PrefixMismatchError


@pytest.fixture
def codec():
    """Create a hex codec."""
    return Codec("base16", "f", lambda data: data.hex(), bytes.fromhex)


def test_codec_attributes(codec):
    """Test codec exposes name, prefix and its parts."""
    assert codec.name == "base16"
    assert codec.prefix == "f"
    assert isinstance(codec.encoder, Encoder)
    assert isinstance(codec.decoder, Decoder)
    assert codec.encoder.prefix == codec.decoder.prefix == "f"


def test_codec_round_trip(codec):
    """Test encode then decode returns the input."""
    data = bytes(range(256))
    assert codec.decode(codec.encode(data)) == data


def test_codec_base_functions_skip_prefix(codec):
    """Test base_encode/base_decode work without the prefix."""
    assert codec.base_encode(b"\x00\x01") == "0001"
    assert codec.base_decode("0001") == b"\x00\x01"


def test_codec_decode_checks_prefix(codec):
    """Test decode goes through the prefix check."""
    with pytest.raises(PrefixMismatchError):
        codec.decode("0001")


def test_codecs_do_not_share_parts():
    """Test two codecs built from the same functions own separate parts."""
    encode = Mock(return_value="")
    decode = Mock(return_value=b"")
    first = Codec("a", "a", encode, decode)
    second = Codec("a", "a", encode, decode)
    assert first.encoder is not second.encoder
    assert first.decoder is not second.decoder


def test_codec_or(codec):
    """Test codecs compose through their decoders."""
    other = Codec("base32", "b", Mock(), Mock())
    composed = codec | other
    assert isinstance(composed, ComposedDecoder)
    assert composed.decoders["f"] is codec.decoder
    assert composed.decoders["b"] is other.decoder


def test_codec_invalid_prefix():
    """Test prefix is validated on construction."""
    with pytest.raises(InvalidPrefixError):
        Codec("base16", "ff", Mock(), Mock())


def test_codec_repr(codec):
    """Test repr names the codec."""
    assert repr(codec) == "Codec(name='base16', prefix='f')"
