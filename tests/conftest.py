"""
Shared fixtures: a fake codec and sample credentials.

FakeCodec "blobs" are hex-encoded canonical JSON, so tests can decode
whatever the dispatcher produced without xrpl-py. Signatures are
deterministic digests of (private key, message).
"""

from __future__ import annotations

import hashlib
import json
from collections.abc import Mapping, Sequence
from typing import Any

import pytest

from xrpl_signer.canonical_json import canonical_json
from xrpl_signer.codec import CombineResult, TxSignResult
from xrpl_signer.credential import AccountCredential, Keypair

ALICE = "rAliceXXXXXXXXXXXXXXXXXXXXXXXXXXX"
BOB = "rBobXXXXXXXXXXXXXXXXXXXXXXXXXXXXX"
CAROL = "rCarolXXXXXXXXXXXXXXXXXXXXXXXXXXX"
SHARED = "rSharedAccountXXXXXXXXXXXXXXXXXX"


def _to_blob(tx: Mapping[str, Any]) -> str:
    return canonical_json(tx).encode("utf-8").hex().upper()


def _digest(data: str) -> str:
    return hashlib.sha256(data.encode("utf-8")).hexdigest().upper()


class FakeCodec:
    """Minimal LedgerCodec implementation for testing."""

    def __init__(self, *, sign_should_raise: Exception | None = None) -> None:
        self._sign_should_raise = sign_should_raise
        self.claim_calls: list[dict[str, str]] = []
        self.sign_bytes_calls: list[tuple[bytes, str]] = []
        self.sign_calls: list[dict[str, Any]] = []
        self.combine_calls: list[tuple[list[str], Any]] = []
        self.decode_calls: list[tuple[str, Any]] = []

    @property
    def call_count(self) -> int:
        return (
            len(self.claim_calls)
            + len(self.sign_bytes_calls)
            + len(self.sign_calls)
            + len(self.combine_calls)
        )

    def encode_claim(self, claim: Mapping[str, str]) -> bytes:
        self.claim_calls.append(dict(claim))
        return canonical_json(dict(claim)).encode("utf-8")

    def sign_bytes(self, message: bytes, private_key: str) -> str:
        self.sign_bytes_calls.append((message, private_key))
        return _digest(private_key + message.hex())

    def sign_transaction(
        self,
        tx_json: str,
        keypair: Keypair,
        *,
        sign_as: str | None = None,
        definitions: Any = None,
    ) -> TxSignResult:
        self.sign_calls.append(
            {"tx_json": tx_json, "keypair": keypair, "sign_as": sign_as, "definitions": definitions}
        )
        if self._sign_should_raise is not None:
            raise self._sign_should_raise

        tx: dict[str, Any] = json.loads(tx_json)
        signature = _digest(keypair.private_key + tx_json)
        if sign_as:
            tx["SigningPubKey"] = ""
            tx["Signers"] = [
                {
                    "Signer": {
                        "Account": sign_as,
                        "SigningPubKey": keypair.public_key,
                        "TxnSignature": signature,
                    }
                }
            ]
        else:
            tx["SigningPubKey"] = keypair.public_key
            tx["TxnSignature"] = signature
        blob = _to_blob(tx)
        return TxSignResult(id=_digest(blob), signed_transaction=blob, tx_json=tx)

    def combine(self, blobs: Sequence[str], definitions: Any = None) -> CombineResult:
        self.combine_calls.append((list(blobs), definitions))
        decoded = [self.decode(b, definitions) for b in blobs]
        signers = [entry for tx in decoded for entry in tx.get("Signers", [])]
        combined = dict(decoded[0])
        combined["Signers"] = sorted(signers, key=lambda e: e["Signer"]["Account"])
        blob = _to_blob(combined)
        return CombineResult(id=_digest(blob), signed_transaction=blob)

    def decode(self, blob: str, definitions: Any = None) -> dict[str, Any]:
        self.decode_calls.append((blob, definitions))
        return json.loads(bytes.fromhex(blob).decode("utf-8"))


def make_credential(address: str, *, sign_as: str | None = None) -> AccountCredential:
    name = address[1:6].lower()
    return AccountCredential(
        address=address,
        keypair=Keypair(public_key=f"ED{name.upper()}", private_key=f"priv-{name}"),
        sign_as=sign_as,
    )


@pytest.fixture
def codec() -> FakeCodec:
    return FakeCodec()


@pytest.fixture
def failing_codec() -> FakeCodec:
    return FakeCodec(sign_should_raise=ValueError("invalid field Amount"))


@pytest.fixture
def alice() -> AccountCredential:
    return make_credential(ALICE)


@pytest.fixture
def bob() -> AccountCredential:
    return make_credential(BOB)


@pytest.fixture
def carol() -> AccountCredential:
    return make_credential(CAROL)


@pytest.fixture
def payment() -> dict[str, Any]:
    return {
        "TransactionType": "Payment",
        "Account": SHARED,
        "Destination": CAROL,
        "Amount": "1000",
        "Fee": "30",
        "Sequence": 7,
    }


@pytest.fixture
def credential_factory():
    return make_credential


@pytest.fixture
def codec_factory():
    return FakeCodec
