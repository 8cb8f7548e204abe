"""
Commit-Embed-Verify: the shape shared by embedded commitment schemes.

An *embedded* commitment does not travel next to its container; it
replaces it.  A scheme takes a container (a public key, for LNPBP-1),
derives a new container from it and a message, and remembers the
original so the commitment can later be checked against a candidate
message.

Conformance is structural: any class providing the members of
:class:`CommitEmbedVerify` is a scheme, no base class needed.
"""

from __future__ import annotations

from typing import Protocol, Type, TypeVar, runtime_checkable

C = TypeVar("C")
S = TypeVar("S", bound="CommitEmbedVerify")


@runtime_checkable
class CommitEmbedVerify(Protocol[C]):
    """
    Contract of an embedded commitment scheme over container type ``C``.

    Attributes
    ----------
    error : type[Exception]
        The scheme's domain error, raised by :meth:`commit_embed` when the
        derivation is degenerate.  :meth:`verify` never raises it.
    """

    error: Type[Exception]

    @classmethod
    def commit_embed(cls: Type[S], container: C, message: bytes) -> S:
        """Deterministically embed ``message`` into ``container``."""
        ...

    def verify(self, message: bytes) -> bool:
        """True iff this commitment was built from ``message``."""
        ...

    def container(self) -> C:
        """The original, un-tweaked container."""
        ...


def verify_embedded(commitment: CommitEmbedVerify, message: bytes) -> bool:
    """
    Generic verification: rebuild the commitment and compare.

    A degenerate derivation for the candidate message means it cannot be
    the committed one, so the scheme's error maps to ``False``.
    """
    scheme = type(commitment)
    try:
        expected = scheme.commit_embed(commitment.container(), message)
    except scheme.error:
        return False
    return expected == commitment
