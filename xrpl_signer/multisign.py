"""
Multi-sign combination.

Two entry shapes converge on one combine step:

    Shape A (``combine_partials``): the caller already holds partial
    signatures: either structured artifacts exposing a signed blob
    (``{"signedTransaction": ...}`` mappings or ``SignedObject`` results)
    or raw hex blob strings. A list must be uniformly one kind.

    Shape B (``sign_and_combine``): the caller passes a transaction and
    two or more credentials. Every credential produces a delegated
    partial signature as ``sign_as`` (when set) or as its own address.

After combination the blob is decoded again, and ``signers`` is read from
the decoded ``Signers`` array rather than from the inputs, so the
reported signers always match what the returned blob embeds.

Same-transaction check:
    By default partials are NOT checked to sign the same underlying
    transaction; unrelated partials produce a blob that fails ledger
    verification later. ``strict=True`` decodes each partial and rejects
    mismatches with ``MismatchedPartialSignatures``.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from typing import Any

from xrpl_signer.canonical_json import canonical_json
from xrpl_signer.codec import BlobCombiner, BlobDecoder, TxSigner
from xrpl_signer.credential import AccountCredential
from xrpl_signer.errors import InvalidMultiSignInput, MismatchedPartialSignatures
from xrpl_signer.signed import MultiSignedTx, assemble_multi_signed_tx

logger = logging.getLogger(__name__)

_BLOB_RE = re.compile(r"[A-F0-9]+")

# Fields that differ between partial signatures of the same transaction.
_SIGNATURE_FIELDS = ("Signers", "TxnSignature", "SigningPubKey")


# =========================================================================
# Input normalization
# =========================================================================


def _structured_blob(item: object) -> str | None:
    if isinstance(item, Mapping):
        blob = item.get("signedTransaction")
    else:
        blob = getattr(item, "signed_transaction", None)
    return blob if isinstance(blob, str) else None


def _raw_blob(item: object) -> str | None:
    if isinstance(item, str) and _BLOB_RE.fullmatch(item.upper()):
        return item
    return None


def collect_partial_blobs(partials: Sequence[object]) -> list[str]:
    """Extract canonical (uppercase) blobs from a list of partials.

    Raises:
        InvalidMultiSignInput: If the list is empty, mixes structured
            artifacts with raw strings, or contains unrecognised elements.
    """
    if not partials:
        raise InvalidMultiSignInput("no signed transactions to combine")

    structured = [_structured_blob(p) for p in partials]
    if all(b is not None for b in structured):
        return [b.upper() for b in structured]  # type: ignore[union-attr]

    raw = [_raw_blob(p) for p in partials]
    if all(b is not None for b in raw):
        return [b.upper() for b in raw]  # type: ignore[union-attr]

    raise InvalidMultiSignInput(
        "expected a list of {signedTransaction: ...} objects "
        "or a list of hex blob strings"
    )


def _unsigned_view(tx: Mapping[str, Any]) -> str:
    return canonical_json(
        {k: v for k, v in tx.items() if k not in _SIGNATURE_FIELDS}
    )


def _check_same_transaction(
    blobs: Sequence[str], decoder: BlobDecoder, definitions: Any
) -> None:
    views = {_unsigned_view(decoder.decode(b, definitions)) for b in blobs}
    if len(views) > 1:
        raise MismatchedPartialSignatures(
            f"{len(blobs)} partial signatures cover {len(views)} "
            f"different transactions"
        )


def signers_of(tx_json: Mapping[str, Any]) -> list[str]:
    """Signer accounts listed in a decoded multi-signed transaction."""
    entries = tx_json.get("Signers") or []
    return [entry["Signer"]["Account"] for entry in entries]


# =========================================================================
# Combination
# =========================================================================


def _combine(
    blobs: Sequence[str],
    combiner: BlobCombiner,
    decoder: BlobDecoder,
    definitions: Any,
    strict: bool,
) -> MultiSignedTx:
    if strict:
        _check_same_transaction(blobs, decoder, definitions)

    result = combiner.combine(blobs, definitions)
    tx_json = decoder.decode(result.signed_transaction, definitions)
    signers = signers_of(tx_json)

    logger.debug(f"Combined {len(blobs)} partial signatures into {len(signers)} signers")
    return assemble_multi_signed_tx(result, tx_json, signers)


def combine_partials(
    partials: Sequence[object],
    *,
    combiner: BlobCombiner,
    decoder: BlobDecoder,
    definitions: Any = None,
    strict: bool = False,
) -> MultiSignedTx:
    """Combine existing partial signatures (Shape A)."""
    blobs = collect_partial_blobs(partials)
    return _combine(blobs, combiner, decoder, definitions, strict)


def sign_and_combine(
    tx: Mapping[str, Any],
    credentials: Sequence[AccountCredential],
    *,
    signer: TxSigner,
    combiner: BlobCombiner,
    decoder: BlobDecoder,
    definitions: Any = None,
    strict: bool = False,
) -> MultiSignedTx:
    """Sign ``tx`` with every credential, then combine (Shape B).

    Raises:
        InvalidMultiSignInput: If fewer than two credentials are given.
    """
    if len(credentials) < 2:
        raise InvalidMultiSignInput(
            f"multi-signing needs at least two credentials, got {len(credentials)}"
        )

    tx_string = canonical_json(tx)
    blobs = [
        signer.sign_transaction(
            tx_string,
            credential.keypair,
            sign_as=credential.signing_identity,
            definitions=definitions,
        ).signed_transaction.upper()
        for credential in credentials
    ]
    return _combine(blobs, combiner, decoder, definitions, strict)
