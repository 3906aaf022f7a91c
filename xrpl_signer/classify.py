"""
Transaction classification: which signing procedure applies.

Two decisions are made here, both before any cryptography:

1. ``resolve_input()``: the entry boundary. The caller may pass one
   credential, a list of credentials, or (with no credentials) a list of
   pre-signed artifacts in place of a transaction. That choice is resolved
   once into a ``SigningInput`` tagged with an ``InputShape``; nothing
   downstream re-tests argument shapes.

2. ``classify()``: the signing category, in priority order:

    - legacy sign-in requests are normalized first (``normalize_sign_in``);
    - payment-channel claims (by TransactionType, by ``command``, or by a
      bare ``channel`` + ``amount`` shape) → PAYMENT_CHANNEL_CLAIM;
    - exactly one credential → SINGLE_SIGN;
    - anything else → MULTI_SIGN.

The caller's transaction is never mutated: ``resolve_input`` takes a
shallow copy and every rewrite happens on that copy.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from xrpl_signer.credential import AccountCredential
from xrpl_signer.errors import InvalidCredentialType, InvalidMultiSignInput

# Compared case-insensitively.
SIGN_IN_TRANSACTION_TYPE = "signin"
CLAIM_TRANSACTION_TYPE = "paymentchannelauthorize"
CLAIM_COMMAND = "channel_authorize"


class SigningCategory(StrEnum):
    """Which signing procedure a request routes to."""

    PAYMENT_CHANNEL_CLAIM = "PaymentChannelClaim"
    SINGLE_SIGN = "SingleSign"
    MULTI_SIGN = "MultiSign"


class InputShape(StrEnum):
    """How the caller expressed who signs and what is signed."""

    SINGLE_CREDENTIAL = "SingleCredential"
    CREDENTIAL_LIST = "CredentialList"
    PRE_SIGNED_BLOBS = "PreSignedBlobList"


@dataclass(frozen=True)
class SigningInput:
    """Resolved request, owned by the dispatcher.

    Attributes:
        shape: How the caller supplied the request.
        transaction: Working copy of the transaction. Empty for
            PRE_SIGNED_BLOBS.
        credentials: Credentials in caller order.
        partials: Pre-signed artifacts or hex blobs (PRE_SIGNED_BLOBS only).
    """

    shape: InputShape
    transaction: dict[str, Any]
    credentials: tuple[AccountCredential, ...] = ()
    partials: tuple[object, ...] = ()


# =========================================================================
# Entry boundary
# =========================================================================


def _check_credential(value: object) -> AccountCredential:
    if not isinstance(value, AccountCredential):
        raise InvalidCredentialType(
            f"expected AccountCredential, got {type(value).__name__}"
        )
    return value


def resolve_input(
    transaction: Mapping[str, Any] | Sequence[object],
    credentials: AccountCredential | Sequence[AccountCredential] | None = None,
) -> SigningInput:
    """Resolve the caller's arguments into a closed ``SigningInput``.

    Raises:
        InvalidCredentialType: If any credential is not an AccountCredential.
        InvalidMultiSignInput: If a pre-signed list is combined with
            credentials, or the transaction is neither a mapping nor a list.
    """
    if credentials is None:
        resolved: tuple[AccountCredential, ...] = ()
        shape = InputShape.CREDENTIAL_LIST
    elif isinstance(credentials, (list, tuple)):
        resolved = tuple(_check_credential(c) for c in credentials)
        shape = InputShape.CREDENTIAL_LIST
    else:
        resolved = (_check_credential(credentials),)
        shape = InputShape.SINGLE_CREDENTIAL

    if isinstance(transaction, (list, tuple)):
        if resolved:
            raise InvalidMultiSignInput(
                "pre-signed transactions cannot be combined with credentials"
            )
        return SigningInput(
            shape=InputShape.PRE_SIGNED_BLOBS,
            transaction={},
            partials=tuple(transaction),
        )

    if not isinstance(transaction, Mapping):
        raise InvalidMultiSignInput(
            f"transaction must be a mapping or a list of signed transactions, "
            f"got {type(transaction).__name__}"
        )

    return SigningInput(
        shape=shape,
        transaction=dict(transaction),
        credentials=resolved,
    )


# =========================================================================
# Classification
# =========================================================================


def _lower(value: object) -> str | None:
    return value.lower() if isinstance(value, str) else None


def normalize_sign_in(tx: dict[str, Any]) -> None:
    """Rewrite a legacy ``TransactionType: SignIn`` request in place.

    Drops ``TransactionType`` and sets ``SignIn: True``. Applying it to an
    already-normalized transaction is a no-op.
    """
    if _lower(tx.get("TransactionType")) == SIGN_IN_TRANSACTION_TYPE:
        del tx["TransactionType"]
        tx["SignIn"] = True


def is_payment_channel_claim(tx: Mapping[str, Any]) -> bool:
    """True if the transaction asks for a payment-channel claim signature."""
    if _lower(tx.get("TransactionType")) == CLAIM_TRANSACTION_TYPE:
        return True
    if _lower(tx.get("command")) == CLAIM_COMMAND:
        return True
    return (
        not tx.get("TransactionType")
        and not tx.get("command")
        and bool(tx.get("channel"))
        and bool(tx.get("amount"))
    )


def classify(signing_input: SigningInput) -> SigningCategory:
    """Determine the signing category, normalizing sign-in requests first.

    Mutates ``signing_input.transaction`` (the owned working copy) when a
    sign-in rewrite applies.
    """
    if signing_input.shape is InputShape.PRE_SIGNED_BLOBS:
        return SigningCategory.MULTI_SIGN

    tx = signing_input.transaction
    normalize_sign_in(tx)

    if is_payment_channel_claim(tx):
        return SigningCategory.PAYMENT_CHANNEL_CLAIM
    if len(signing_input.credentials) == 1:
        return SigningCategory.SINGLE_SIGN
    return SigningCategory.MULTI_SIGN
