"""
Hashing for LNPBP-1 commitments.

Two domain separators are involved and they live on different layers:

1. The **protocol-specific prefix**  SHA-256(tag)  (e.g. tag = "RGB") is
   prepended to the message by the *calling protocol* before it reaches
   the commitment scheme.  :func:`prefix_message` is provided for that
   layer; the scheme itself never calls it.

2. The **LNPBP-1 tag**  SHA-256("LNPBP1")  is mixed into every tweak
   derivation by the scheme:

       factor = HMAC-SHA256( key = ser(P),  data = LNPBP1_TAG ‖ msg )

Keying the HMAC with the compressed container ties a factor to one key,
and the tag ties it to this protocol.

References
----------
- LNPBP-1  "Key tweaking: collision-resistant elliptic curve-based
  commitments"
- RFC 2104  HMAC
"""

from __future__ import annotations

import hashlib
import hmac

HASH_BYTES = 32

# ── protocol tag ────────────────────────────────────────────────────────
LNPBP1_TAG: bytes = hashlib.sha256(b"LNPBP1").digest()


def _as_bytes(data) -> bytes:
    """Copy a bytes-like object; ints, str and the like raise ``TypeError``."""
    try:
        return memoryview(data).tobytes()
    except TypeError as exc:
        raise TypeError(
            f"expected a bytes-like object, got {type(data).__name__}"
        ) from exc


def sha256(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def hmac_sha256(key: bytes, data: bytes) -> bytes:
    return hmac.new(key, data, hashlib.sha256).digest()


def prefix_message(tag, message: bytes) -> bytes:
    """
    Protocol-layer prefixing  SHA-256(tag) ‖ message.

    ``tag`` may be ``str`` (UTF-8 encoded) or ``bytes``.  The result is the
    message form that :meth:`PubkeyCommitment.commit_embed` expects.
    """
    if isinstance(tag, str):
        tag = tag.encode("utf-8")
    return sha256(_as_bytes(tag)) + _as_bytes(message)


def commitment_factor(container: bytes, message: bytes) -> bytes:
    """Tweak factor  HMAC-SHA256(ser(P), LNPBP1_TAG ‖ msg)  (32 bytes)."""
    return hmac_sha256(_as_bytes(container), LNPBP1_TAG + _as_bytes(message))
