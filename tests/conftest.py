"""Common test fixtures and utilities."""
import base64
import binascii

import base58
import pytest
from loguru import logger

from prefixcodec import from_base, with_alphabet, with_settings

BTC_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"


def b58_encode(data, alphabet):
    return base58.b58encode(data, alphabet=alphabet.encode()).decode()


def b58_decode(text, alphabet):
    return base58.b58decode(text, alphabet=alphabet.encode())


def b32_encode(data, settings):
    text = base64.b32encode(data).decode()
    if not settings["pad"]:
        text = text.rstrip("=")
    return text if settings["upper"] else text.lower()


def b32_decode(text, settings):
    text = text.upper()
    return base64.b32decode(text + "=" * (-len(text) % 8))


def b64_encode(data, settings):
    text = base64.b64encode(data).decode()
    return text if settings["pad"] else text.rstrip("=")


def b64_decode(text, settings):
    return base64.b64decode(text + "=" * (-len(text) % 4), validate=True)


@pytest.fixture
def base16():
    """Create a hex codec."""
    return from_base(
        name="base16",
        prefix="f",
        encode=lambda data: binascii.hexlify(data).decode(),
        decode=binascii.unhexlify
    )


@pytest.fixture
def base58btc():
    """Create a base58btc codec."""
    return with_alphabet(
        name="base58btc",
        prefix="z",
        alphabet=BTC_ALPHABET,
        encode=b58_encode,
        decode=b58_decode
    )


@pytest.fixture
def base32():
    """Create an unpadded lowercase base32 codec."""
    return with_settings(
        name="base32",
        prefix="b",
        settings={"pad": False, "upper": False},
        encode=b32_encode,
        decode=b32_decode
    )


@pytest.fixture
def base64pad():
    """Create a padded base64 codec."""
    return with_settings(
        name="base64pad",
        prefix="M",
        settings={"pad": True},
        encode=b64_encode,
        decode=b64_decode
    )


@pytest.fixture
def log_messages():
    """Collect prefixcodec log output."""
    messages = []
    logger.enable("prefixcodec")
    handler_id = logger.add(messages.append, level="DEBUG", format="{level} {message}")
    yield messages
    logger.remove(handler_id)
    logger.disable("prefixcodec")
