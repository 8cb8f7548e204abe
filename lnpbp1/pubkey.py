"""
LNPBP-1 collision-resistant commitments to secp256k1 public keys.

A message *m* is embedded into a public key *P* as

    f  = HMAC-SHA256( key = ser(P),  data = LNPBP1_TAG ‖ m )
    P' = P + f·G

where ser(P) is the 33-byte compressed encoding.

Security:
- Binding / collision resistant: two messages giving the same *P'* for
  one *P* would be an HMAC-SHA256 collision.
- Hiding: without *m* (and *P*), *P'* is indistinguishable from an
  independently generated key.
- Keying with *P* and mixing in the tag stops a message from being
  replayed against another key or under another protocol.

The message must already carry the calling protocol's 32-byte
SHA-256(tag) prefix (see :func:`lnpbp1.hash.prefix_message`); it is
hashed as given.

References
----------
- LNPBP-1  https://github.com/LNP-BP/lnpbps/blob/master/lnpbp-0001.md
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from .curve import COMPRESSED_BYTES, CurveError, InvalidTweakError, Point
from .commit_verify import verify_embedded
from .hash import commitment_factor

logger = logging.getLogger(__name__)


class ECPointAtInfinity(ValueError):
    """The derived tweak is out of range or sends the key to infinity."""


def narrow_curve_error(error: CurveError) -> ECPointAtInfinity:
    """
    Map a failure of ``Point.tweak_add`` onto the scheme's single error.

    Only an invalid tweak can come out of the tweak step: the factor is
    always 32 bytes and the container is a parsed key.  Anything else is
    a bug, raised as ``RuntimeError`` rather than returned.
    """
    if isinstance(error, InvalidTweakError):
        return ECPointAtInfinity("tweaked public key is at infinity")
    logger.error("unexpected curve failure during tweak: %r", error)
    raise RuntimeError(
        f"{type(error).__name__} can't be raised by tweak-add"
    ) from error


@dataclass(frozen=True)
class PubkeyCommitment:
    """A public key  ``tweaked``  committing to a message under ``original``."""

    tweaked: Point
    original: Point

    error = ECPointAtInfinity

    def __post_init__(self) -> None:
        if not isinstance(self.tweaked, Point) or not isinstance(
            self.original, Point
        ):
            raise TypeError("commitment keys must be Point instances")
        if self.tweaked.is_inf():
            raise ValueError("tweaked public key is at infinity")
        if self.original.is_inf():
            raise ValueError("original public key is at infinity")

    @classmethod
    def commit_embed(cls, container: Point, message: bytes) -> PubkeyCommitment:
        """
        Embed ``message`` into ``container``.

        Parameters
        ----------
        container : Point
            Valid public key; not modified.
        message : bytes
            Protocol-prefixed message (SHA-256(tag) ‖ payload).

        Raises
        ------
        ECPointAtInfinity
            If the derived tweak is degenerate for this key.
        """
        factor = commitment_factor(container.to_bytes_compressed(), message)
        try:
            tweaked = container.tweak_add(factor)
        except CurveError as exc:
            err = narrow_curve_error(exc)
            logger.debug("degenerate LNPBP-1 tweak for %s", container.to_hex())
            raise err from exc
        logger.debug("committed into %s -> %s", container.to_hex(), tweaked.to_hex())
        return cls(tweaked=tweaked, original=container)

    def verify(self, message: bytes) -> bool:
        return verify_embedded(self, message)

    def container(self) -> Point:
        return self.original

    def to_bytes(self) -> bytes:
        """original ‖ tweaked, both compressed (66 bytes)."""
        return self.original.to_bytes_compressed() + self.tweaked.to_bytes_compressed()

    @classmethod
    def from_bytes(cls, data: bytes) -> PubkeyCommitment:
        if len(data) != 2 * COMPRESSED_BYTES:
            raise ValueError(
                f"expected {2 * COMPRESSED_BYTES} bytes, got {len(data)}"
            )
        original = Point.from_bytes(data[:COMPRESSED_BYTES])
        tweaked = Point.from_bytes(data[COMPRESSED_BYTES:])
        return cls(tweaked=tweaked, original=original)
