"""Single-prefix and composed multibase decoders.

This module provides the two members of the decoder union:
- Decoder: strips and checks one fixed prefix, then runs a raw decoder
- ComposedDecoder: dispatches on the first character to a Decoder

Both carry a ``kind`` attribute (DecoderKind.SINGLE or DecoderKind.COMPOSED)
which composition uses to tell them apart.
"""

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Callable, ClassVar, Dict, Mapping, Tuple, Union

from loguru import logger

from .config import default_config as defaults
from .errors import DuplicatePrefixError, PrefixMismatchError, TypeMismatchError, UnsupportedPrefixError
from .types import DecoderKind, DuplicatePrefixPolicy
from .utils.validation import validate_prefix, validate_text

PolicyLike = Union[DuplicatePrefixPolicy, str, None]


def _resolve_policy(policy: PolicyLike) -> DuplicatePrefixPolicy:
    if policy is None:
        policy = defaults.DUPLICATE_PREFIX_POLICY
    return DuplicatePrefixPolicy(policy)


@dataclass(frozen=True)
class Decoder:
    """Decodes multibase text carrying one specific prefix.

    Can also be used to base decode text without the prefix through
    ``base_decode``.

    Attributes:
        name: Encoding name
        prefix: Single character the input must start with
        base_decode: Raw decode function, text to bytes
    """
    name: str
    prefix: str
    base_decode: Callable[[str], bytes]

    kind: ClassVar[DecoderKind] = DecoderKind.SINGLE

    def __post_init__(self):
        """Validate prefix."""
        validate_prefix(self.prefix)

    def decode(self, text: str) -> bytes:
        """Check and strip the prefix, then decode the remainder.

        Args:
            text: Prefixed text

        Returns:
            Decoded bytes

        Raises:
            TypeMismatchError: If text is not a string
            PrefixMismatchError: If text does not start with this prefix
        """
        text = validate_text(text)
        if text[:1] != self.prefix:
            raise PrefixMismatchError(self.name, self.prefix, text)
        return bytes(self.base_decode(text[1:]))

    def or_(self, other: Any, policy: PolicyLike = None) -> "ComposedDecoder":
        """Compose with another decoder.

        Entries of ``other`` win over this decoder on a shared prefix unless
        the resulting policy rejects duplicates.

        Args:
            other: Decoder, ComposedDecoder or Codec
            policy: Duplicate prefix policy, defaults to the configured one

        Returns:
            New composed decoder
        """
        return ComposedDecoder.from_decoder(self, policy=policy).or_(other)

    def __or__(self, other: Any) -> "ComposedDecoder":
        return self.or_(other)


class ComposedDecoder:
    """Decoder for several multibase encodings, keyed by prefix.

    Instances are immutable: ``or_`` always returns a new ComposedDecoder
    and leaves both operands untouched. ``prefix`` is always None.

    Examples:
        >>> hex_and_b58 = ComposedDecoder.from_decoder(base16.decoder).or_(base58btc.decoder)
        >>> hex_and_b58.decode("f000102")
        b'\\x00\\x01\\x02'
        >>> hex_and_b58.prefixes
        ('f', 'z')
    """

    __slots__ = ("_decoders", "_policy")

    kind = DecoderKind.COMPOSED
    prefix = None

    def __init__(self, decoders: Mapping[str, Decoder], policy: PolicyLike = None):
        """Initialize composed decoder.

        Args:
            decoders: Mapping of prefix to single-prefix decoder
            policy: Duplicate prefix policy, defaults to the configured one

        Raises:
            TypeMismatchError: If a value is not a single-prefix Decoder
            ValueError: If a key differs from its decoder's prefix
        """
        table: Dict[str, Decoder] = {}
        for prefix, decoder in decoders.items():
            if not isinstance(decoder, Decoder):
                raise TypeMismatchError(
                    f"Composed decoders hold single-prefix decoders, got {type(decoder).__name__}"
                )
            if prefix != decoder.prefix:
                raise ValueError(
                    f"Key {prefix!r} does not match prefix {decoder.prefix!r} of {decoder.name}"
                )
            table[prefix] = decoder
        self._decoders = MappingProxyType(table)
        self._policy = _resolve_policy(policy)

    @classmethod
    def from_decoder(cls, decoder: Any, policy: PolicyLike = None) -> "ComposedDecoder":
        """Wrap a single decoder into a one-entry composed decoder.

        Args:
            decoder: Decoder or Codec; a ComposedDecoder is copied
            policy: Duplicate prefix policy, defaults to the configured one

        Returns:
            New composed decoder
        """
        decoder = _as_decoder(decoder)
        if decoder.kind is DecoderKind.COMPOSED:
            return cls(decoder.decoders, policy if policy is not None else decoder.policy)
        return cls({decoder.prefix: decoder}, policy)

    @property
    def decoders(self) -> Mapping[str, Decoder]:
        """Read-only view of the prefix to decoder table."""
        return self._decoders

    @property
    def policy(self) -> DuplicatePrefixPolicy:
        return self._policy

    @property
    def prefixes(self) -> Tuple[str, ...]:
        """Supported prefixes, sorted."""
        return tuple(sorted(self._decoders))

    def or_(self, other: Any) -> "ComposedDecoder":
        """Compose with another decoder.

        Entries of ``other`` win on a shared prefix under the REPLACE policy.
        The result rejects duplicates if either operand does.

        Args:
            other: Decoder, ComposedDecoder or Codec

        Returns:
            New composed decoder

        Raises:
            DuplicatePrefixError: If a prefix collides under the REJECT policy
        """
        other = _as_decoder(other)
        if other.kind is DecoderKind.COMPOSED:
            incoming = other.decoders
            policy = DuplicatePrefixPolicy.strictest(self._policy, other.policy)
        else:
            incoming = {other.prefix: other}
            policy = self._policy
        return ComposedDecoder(_merge(self._decoders, incoming, policy), policy)

    def __or__(self, other: Any) -> "ComposedDecoder":
        return self.or_(other)

    def decode(self, text: str) -> bytes:
        """Decode text with the decoder registered for its first character.

        Args:
            text: Prefixed text

        Returns:
            Decoded bytes

        Raises:
            TypeMismatchError: If text is not a string
            UnsupportedPrefixError: If no decoder is registered for the prefix
        """
        text = validate_text(text)
        decoder = self._decoders.get(text[:1])
        if decoder is None:
            raise UnsupportedPrefixError(text, self._decoders)
        return decoder.decode(text)

    def __contains__(self, prefix: object) -> bool:
        return prefix in self._decoders

    def __len__(self) -> int:
        return len(self._decoders)

    def __repr__(self) -> str:
        names = ", ".join(f"{p}={d.name}" for p, d in sorted(self._decoders.items()))
        return f"ComposedDecoder({names}, policy={self._policy.value})"


AnyDecoder = Union[Decoder, ComposedDecoder]


def _as_decoder(value: Any) -> AnyDecoder:
    """Return value as a decoder, unwrapping a Codec's decoder."""
    if isinstance(value, (Decoder, ComposedDecoder)):
        return value
    decoder = getattr(value, "decoder", None)
    if isinstance(decoder, Decoder):
        return decoder
    raise TypeMismatchError(f"Can not compose with {type(value).__name__}, expected a decoder")


def _merge(
    existing: Mapping[str, Decoder],
    incoming: Mapping[str, Decoder],
    policy: DuplicatePrefixPolicy
) -> Dict[str, Decoder]:
    merged = dict(existing)
    for prefix, decoder in incoming.items():
        current = merged.get(prefix)
        if current is not None and current is not decoder:
            if policy is DuplicatePrefixPolicy.REJECT:
                raise DuplicatePrefixError(prefix, current.name, decoder.name)
            logger.warning(f"Prefix {prefix!r}: {current.name} replaced by {decoder.name}")
        merged[prefix] = decoder
    logger.debug(f"Composed decoder for prefixes: {''.join(sorted(merged))}")
    return merged
