"""
secp256k1 public-key primitive via libsecp256k1.

Commitment containers are plain secp256k1 public keys.  All group
arithmetic is delegated to the C library ``coincurve``, which wraps
Bitcoin Core's libsecp256k1; this module only adds the canonical
compressed encoding and a typed error set on top of it.

Install
-------
    pip install coincurve>=18.0.0

References
----------
- SEC 2 v2 §2.4.1  secp256k1 domain parameters
- libsecp256k1     ``secp256k1_ec_pubkey_tweak_add``
"""

from __future__ import annotations

from typing import Optional

from coincurve import PrivateKey as _SK, PublicKey as _PK

# ── secp256k1 constants ─────────────────────────────────────────────────
ORDER = 0xFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFFEBAAEDCE6AF48A03BBFD25E8CD0364141
SCALAR_BYTES = 32
COMPRESSED_BYTES = 33


# ── errors ──────────────────────────────────────────────────────────────
class CurveError(ValueError):
    """Base class for failures reported by the curve primitive."""


class InvalidTweakError(CurveError):
    """Tweak is out of range or the tweaked point is at infinity."""


class InvalidPublicKeyError(CurveError):
    """Bytes do not encode a point on secp256k1."""


class InvalidScalarError(CurveError):
    """Scalar has the wrong length or is out of range."""


def _scalar_bytes(scalar) -> bytes:
    if isinstance(scalar, int):
        if not 0 <= scalar < 1 << (8 * SCALAR_BYTES):
            raise InvalidScalarError("scalar does not fit in 32 bytes")
        return scalar.to_bytes(SCALAR_BYTES, "big")
    data = bytes(scalar)
    if len(data) != SCALAR_BYTES:
        raise InvalidScalarError(
            f"need {SCALAR_BYTES} bytes, got {len(data)}"
        )
    return data


# ── Point  (secp256k1 group element via libsecp256k1) ───────────────────
class Point:
    """
    Point on secp256k1.

    The identity (point at infinity) is represented by a flag rather than
    a ``coincurve.PublicKey``, which cannot hold it.  Containers and
    tweaked keys are never the identity; it exists so that callers can
    express and reject it explicitly.
    """

    __slots__ = ("_pk", "_inf")

    def __init__(self, *, pk: Optional[_PK] = None, infinity: bool = False):
        self._pk: Optional[_PK] = pk
        self._inf: bool = infinity

    # constructors -----------------------------------------------------------
    @classmethod
    def generator(cls) -> Point:
        """Standard base point *G*."""
        return cls(pk=_SK(b"\x00" * 31 + b"\x01").public_key)

    @classmethod
    def identity(cls) -> Point:
        """Point at infinity."""
        return cls(infinity=True)

    @classmethod
    def from_secret(cls, secret) -> Point:
        """Compute *secret · G* for a 32-byte or integer secret in [1, n-1]."""
        data = _scalar_bytes(secret)
        try:
            return cls(pk=_SK(data).public_key)
        except ValueError as exc:
            raise InvalidScalarError("secret out of range") from exc

    @classmethod
    def from_bytes(cls, data: bytes) -> Point:
        """Deserialise SEC 1 compressed (33 B) or uncompressed (65 B)."""
        try:
            return cls(pk=_PK(bytes(data)))
        except (ValueError, TypeError) as exc:
            raise InvalidPublicKeyError(
                f"invalid public key encoding ({len(data)} bytes)"
            ) from exc

    @classmethod
    def from_hex(cls, text: str) -> Point:
        try:
            data = bytes.fromhex(text)
        except ValueError as exc:
            raise InvalidPublicKeyError("public key is not valid hex") from exc
        return cls.from_bytes(data)

    # serialisation ----------------------------------------------------------
    def to_bytes_compressed(self) -> bytes:
        if self._inf:
            return b"\x00" * COMPRESSED_BYTES
        return self._pk.format(compressed=True)  # type: ignore[union-attr]

    def to_bytes(self) -> bytes:
        return self.to_bytes_compressed()

    def to_hex(self) -> str:
        return self.to_bytes_compressed().hex()

    def is_inf(self) -> bool:
        return self._inf

    # group operations -------------------------------------------------------
    def tweak_add(self, tweak) -> Point:
        """
        Return  self + tweak·G  as a new point; ``self`` is left untouched.

        ``tweak`` is a 32-byte big-endian scalar (or an int).  libsecp256k1
        rejects a tweak ≥ n and a result at infinity; both are reported as
        :class:`InvalidTweakError`.
        """
        if self._inf:
            raise InvalidPublicKeyError("cannot tweak the point at infinity")
        data = _scalar_bytes(tweak)
        try:
            tweaked = self._pk.add(data)  # type: ignore[union-attr]
        except ValueError as exc:
            raise InvalidTweakError(
                "tweak out of range or result at infinity"
            ) from exc
        return Point(pk=tweaked)

    # comparison / hashing ---------------------------------------------------
    def __eq__(self, o: object) -> bool:
        if not isinstance(o, Point):
            return False
        if self._inf and o._inf:
            return True
        if self._inf or o._inf:
            return False
        return self._pk.format() == o._pk.format()  # type: ignore

    def __hash__(self) -> int:
        return hash(self.to_bytes())

    def __repr__(self) -> str:
        if self._inf:
            return "Point(∞)"
        return f"Point({self.to_hex()})"


# ── module-level generator ──────────────────────────────────────────────
G = Point.generator()
