"""
Codec protocols: the cryptography and serialization boundary.

The dispatcher never encodes, signs, or decodes anything itself. It
depends on the interfaces below and receives a concrete implementation
at construction time:

    - ``ClaimEncoder``: canonical claim bytes for channel authorization.
    - ``BytesSigner``: raw signature over bytes.
    - ``TxSigner``: sign a JSON transaction (optionally as a delegate).
    - ``BlobCombiner``: merge partial multi-signature blobs.
    - ``BlobDecoder``: blob back to structured JSON.
    - ``LedgerCodec``: all of the above in one object.

Concrete implementations:
    - XrplCodec (xrpl-py, ``xrpl_signer.xrpl_codec``)
    - FakeCodec (tests)

``definitions`` is an opaque protocol-definitions object. It is passed
through unmodified; only the codec knows what to do with it.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Protocol, runtime_checkable

from xrpl_signer.credential import Keypair

# =========================================================================
# Result types
# =========================================================================


@dataclass(frozen=True)
class TxSignResult:
    """Result of signing one transaction.

    Attributes:
        id: Transaction hash (64 hex chars).
        signed_transaction: Signed transaction blob, hex.
        tx_json: The signed transaction as structured JSON.
    """

    id: str
    signed_transaction: str
    tx_json: dict[str, Any]


@dataclass(frozen=True)
class CombineResult:
    """Result of combining partial signatures.

    Attributes:
        id: Hash of the combined transaction.
        signed_transaction: Combined multi-signed blob, hex.
    """

    id: str
    signed_transaction: str


# =========================================================================
# Protocols
# =========================================================================


@runtime_checkable
class ClaimEncoder(Protocol):
    def encode_claim(self, claim: Mapping[str, str]) -> bytes:
        """Encode a ``{channel, amount}`` claim for signing."""
        ...


@runtime_checkable
class BytesSigner(Protocol):
    def sign_bytes(self, message: bytes, private_key: str) -> str:
        """Sign raw bytes, returning the signature as hex."""
        ...


@runtime_checkable
class TxSigner(Protocol):
    def sign_transaction(
        self,
        tx_json: str,
        keypair: Keypair,
        *,
        sign_as: str | None = None,
        definitions: Any = None,
    ) -> TxSignResult:
        """Sign a JSON-encoded transaction.

        Args:
            tx_json: Transaction as a JSON string.
            keypair: Key material of the signer.
            sign_as: If set, produce a multi-sign partial signature
                on behalf of this address instead of a single signature.
            definitions: Protocol definitions, passed through.

        Raises:
            ValueError: If the transaction cannot be encoded.
        """
        ...


@runtime_checkable
class BlobCombiner(Protocol):
    def combine(
        self, blobs: Sequence[str], definitions: Any = None
    ) -> CombineResult:
        """Merge N partial signature blobs into one multi-signed blob."""
        ...


@runtime_checkable
class BlobDecoder(Protocol):
    def decode(self, blob: str, definitions: Any = None) -> dict[str, Any]:
        """Decode a transaction blob into structured JSON."""
        ...


@runtime_checkable
class LedgerCodec(
    ClaimEncoder, BytesSigner, TxSigner, BlobCombiner, BlobDecoder, Protocol
):
    """Every collaborator the dispatcher needs, in one object."""
