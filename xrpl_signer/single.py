"""
Single signing: one credential, one signed transaction.

The transaction crosses to the signing primitive as canonical JSON. When
the credential carries a ``sign_as`` role the primitive produces a
delegated (multi-sign style) signature and that role is reported as the
signer; otherwise the credential's own address is.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from xrpl_signer.canonical_json import canonical_json
from xrpl_signer.codec import TxSigner
from xrpl_signer.credential import AccountCredential
from xrpl_signer.signed import SignedTx, assemble_signed_tx


def sign_single(
    tx: Mapping[str, Any],
    credential: AccountCredential,
    signer: TxSigner,
    *,
    definitions: Any = None,
) -> SignedTx:
    """Sign ``tx`` with one credential.

    Errors from the signing primitive (malformed fields, bad keys)
    propagate unchanged.
    """
    result = signer.sign_transaction(
        canonical_json(tx),
        credential.keypair,
        sign_as=credential.sign_as or None,
        definitions=definitions,
    )
    return assemble_signed_tx(result, credential.signing_identity)
