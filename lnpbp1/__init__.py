"""
lnpbp1: collision-resistant commitments to secp256k1 public keys.

Implements LNPBP-1 key tweaking:

- **Embedding** a message into an existing public key so that the
  result looks like any other key
- **Verification** of the embedding given the message and both keys
- A generic **Commit-Embed-Verify** contract for further container types

Quick start
-----------
::

    from lnpbp1 import Point, PubkeyCommitment, prefix_message

    key = Point.from_hex(
        "0218845781f631c48f1c9709e23092067d06837f30aa0cd0544ac887fe91ddd166"
    )
    msg = prefix_message("RGB", b"Message to commit to")

    commitment = PubkeyCommitment.commit_embed(key, msg)
    assert commitment.verify(msg)
    assert commitment.container() == key
"""

__version__ = "0.1.0"

# ── curve primitive ─────────────────────────────────────────────────────
from .curve import (
    Point,
    G,
    ORDER,
    CurveError,
    InvalidTweakError,
    InvalidPublicKeyError,
    InvalidScalarError,
)

# ── hashing ─────────────────────────────────────────────────────────────
from .hash import LNPBP1_TAG, commitment_factor, prefix_message

# ── commitments ─────────────────────────────────────────────────────────
from .commit_verify import CommitEmbedVerify, verify_embedded
from .pubkey import ECPointAtInfinity, PubkeyCommitment, narrow_curve_error

__all__ = [
    # version
    "__version__",
    # curve
    "Point", "G", "ORDER",
    "CurveError", "InvalidTweakError", "InvalidPublicKeyError",
    "InvalidScalarError",
    # hashing
    "LNPBP1_TAG", "commitment_factor", "prefix_message",
    # commitments
    "CommitEmbedVerify", "verify_embedded",
    "ECPointAtInfinity", "PubkeyCommitment", "narrow_curve_error",
]
