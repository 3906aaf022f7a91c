"""
xrpl-py implementation of ``LedgerCodec``.

Wraps ``xrpl.core.binarycodec`` and ``xrpl.core.keypairs`` behind the
codec protocols so the dispatcher stays free of serialization details.

Signing modes:
    - Single: ``SigningPubKey`` is the signer's public key and
      ``TxnSignature`` covers ``encode_for_signing(tx)``.
    - Delegated (``sign_as``): ``SigningPubKey`` is empty and a single
      ``Signers`` entry covers ``encode_for_multisigning(tx, sign_as)``.
      This is the partial-signature form that ``combine()`` merges.

``SignIn`` is a wallet-level flag, not a ledger field. It is removed
before encoding and re-attached to the returned ``tx_json``.

Transaction ids are SHA-512Half over the ``TXN\\0`` prefix plus the
signed blob, which is how the ledger identifies transactions.

Custom protocol definitions are not supported by xrpl-py's bundled
codec; passing any non-None ``definitions`` raises ValueError.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from xrpl.core import binarycodec, keypairs
from xrpl.core.addresscodec import decode_classic_address
from xrpl.core.keypairs.helpers import sha512_first_half

from xrpl_signer.codec import CombineResult, TxSignResult
from xrpl_signer.credential import Keypair

logger = logging.getLogger(__name__)

# Hash prefix for signed transactions: "TXN\0".
TRANSACTION_ID_PREFIX = "54584E00"


def transaction_id(blob: str) -> str:
    """SHA-512Half of a signed transaction blob, uppercase hex."""
    return sha512_first_half(bytes.fromhex(TRANSACTION_ID_PREFIX + blob)).hex().upper()


def _require_bundled_definitions(definitions: Any) -> None:
    if definitions is not None:
        raise ValueError(
            "custom definitions are not supported by the xrpl-py codec"
        )


class XrplCodec:
    """Stateless ``LedgerCodec`` backed by xrpl-py."""

    # --- Payment channel claims ---

    def encode_claim(self, claim: Mapping[str, str]) -> bytes:
        return bytes.fromhex(binarycodec.encode_for_signing_claim(dict(claim)))

    def sign_bytes(self, message: bytes, private_key: str) -> str:
        return keypairs.sign(message, private_key)

    # --- Transactions ---

    def sign_transaction(
        self,
        tx_json: str,
        keypair: Keypair,
        *,
        sign_as: str | None = None,
        definitions: Any = None,
    ) -> TxSignResult:
        _require_bundled_definitions(definitions)

        tx: dict[str, Any] = json.loads(tx_json)
        sign_in = tx.pop("SignIn", None)

        if sign_as:
            tx["SigningPubKey"] = ""
            message = binarycodec.encode_for_multisigning(tx, sign_as)
            tx["Signers"] = [
                {
                    "Signer": {
                        "Account": sign_as,
                        "SigningPubKey": keypair.public_key,
                        "TxnSignature": self.sign_bytes(
                            bytes.fromhex(message), keypair.private_key
                        ),
                    }
                }
            ]
        else:
            tx["SigningPubKey"] = keypair.public_key
            message = binarycodec.encode_for_signing(tx)
            tx["TxnSignature"] = self.sign_bytes(
                bytes.fromhex(message), keypair.private_key
            )

        blob = binarycodec.encode(tx)
        signed = binarycodec.decode(blob)
        if sign_in is not None:
            signed["SignIn"] = sign_in
        return TxSignResult(
            id=transaction_id(blob),
            signed_transaction=blob,
            tx_json=signed,
        )

    def combine(
        self, blobs: Sequence[str], definitions: Any = None
    ) -> CombineResult:
        _require_bundled_definitions(definitions)
        if not blobs:
            raise ValueError("no partial signatures to combine")

        decoded = [binarycodec.decode(blob) for blob in blobs]

        signers: dict[str, dict[str, Any]] = {}
        for tx in decoded:
            for entry in tx.get("Signers") or []:
                signers.setdefault(entry["Signer"]["Account"], entry)
        if not signers:
            raise ValueError("partial signatures carry no Signers entries")

        combined = dict(decoded[0])
        # The ledger requires Signers sorted by numeric account id.
        combined["Signers"] = sorted(
            signers.values(),
            key=lambda entry: decode_classic_address(entry["Signer"]["Account"]),
        )
        blob = binarycodec.encode(combined)
        logger.debug(
            f"Merged {len(blobs)} blobs into {len(signers)} unique signers"
        )
        return CombineResult(id=transaction_id(blob), signed_transaction=blob)

    def decode(self, blob: str, definitions: Any = None) -> dict[str, Any]:
        _require_bundled_definitions(definitions)
        return binarycodec.decode(blob)
