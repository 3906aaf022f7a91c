"""
Payment-channel claim authorization.

A claim is not a transaction: only ``{channel, amount}`` is encoded
(claim prefix + channel id + amount) and the bytes are signed directly.
There is no transaction id and exactly one authorizing identity, the
channel owner, so delegated credentials and multiple credentials are
both rejected before anything is signed.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from xrpl_signer.codec import BytesSigner, ClaimEncoder
from xrpl_signer.credential import AccountCredential
from xrpl_signer.errors import MultiSignNotSupportedForClaim, SignAsNotAllowedForClaim
from xrpl_signer.signed import SignedPayChanAuth, assemble_pay_chan_auth


def extract_claim(tx: Mapping[str, Any]) -> dict[str, str]:
    """The minimal claim payload carried by a channel-authorize request.

    Raises:
        ValueError: If ``channel`` or ``amount`` is missing or not a string.
    """
    claim = {"channel": tx.get("channel"), "amount": tx.get("amount")}
    missing = [name for name, value in claim.items() if not isinstance(value, str) or not value]
    if missing:
        raise ValueError(
            f"payment channel claim needs string {' and '.join(missing)}"
        )
    return claim


def authorize_claim(
    tx: Mapping[str, Any],
    credentials: Sequence[AccountCredential],
    *,
    encoder: ClaimEncoder,
    signer: BytesSigner,
) -> SignedPayChanAuth:
    """Sign a payment-channel claim with exactly one credential.

    Raises:
        MultiSignNotSupportedForClaim: If the credential count is not 1.
        SignAsNotAllowedForClaim: If the credential has a sign_as role.
        ValueError: If the claim lacks a channel or amount.
    """
    if len(credentials) != 1:
        raise MultiSignNotSupportedForClaim(
            f"payment channel authorization needs exactly one credential, "
            f"got {len(credentials)}"
        )
    credential = credentials[0]
    if credential.delegated:
        raise SignAsNotAllowedForClaim(
            f"payment channel authorization cannot sign as {credential.sign_as!r}"
        )

    claim = extract_claim(tx)
    signature = signer.sign_bytes(
        encoder.encode_claim(claim), credential.keypair.private_key
    )
    return assemble_pay_chan_auth(signature, claim, credential.address)
