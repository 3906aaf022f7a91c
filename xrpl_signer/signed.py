"""
Signed objects: the uniform result of every signing path.

Three variants, tagged by ``type``:

    - ``SignedTx``: one signer, a full transaction blob.
    - ``MultiSignedTx``: a combined blob; signers read back from it.
    - ``SignedPayChanAuth``: a raw claim signature, no transaction id.

All variants are frozen. ``tx_json`` is a read-only deep copy (nested
mappings are proxies, nested lists are tuples), so neither the caller
nor the codec can change a result after it is returned. ``to_dict()``
thaws it back into the plain camelCase wire shape consumed by wallets
and validated by ``schemas/signed_object.schema.json``.

The ``assemble_*`` functions are pure packaging: they select fields from
component results and pick the right variant. No other logic.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any, ClassVar

from xrpl_signer.codec import CombineResult, TxSignResult


class SignedObjectType(StrEnum):
    """Wire tag of a signed object."""

    SIGNED_TX = "SignedTx"
    MULTI_SIGNED_TX = "MultiSignedTx"
    SIGNED_PAY_CHAN_AUTH = "SignedPayChanAuth"


def _freeze(value: Any) -> Any:
    """Read-only deep copy: mappings become proxies, lists become tuples."""
    if isinstance(value, Mapping):
        return MappingProxyType({k: _freeze(v) for k, v in value.items()})
    if isinstance(value, (list, tuple)):
        return tuple(_freeze(v) for v in value)
    return value


def _thaw(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _thaw(v) for k, v in value.items()}
    if isinstance(value, tuple):
        return [_thaw(v) for v in value]
    return value


# =========================================================================
# Variants
# =========================================================================


@dataclass(frozen=True)
class SignedObject:
    """Common shape of all signed results.

    Attributes:
        id: Transaction hash, or "" for channel claims.
        signed_transaction: Hex blob (or raw signature for claims).
        tx_json: Structured view of what was signed.
        signers: Addresses (or delegated roles) that authorized it.
    """

    type: ClassVar[SignedObjectType]

    id: str
    signed_transaction: str
    tx_json: Mapping[str, Any] = field(default_factory=dict)
    signers: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "tx_json", _freeze(self.tx_json))
        object.__setattr__(self, "signers", tuple(self.signers))

    def to_dict(self) -> dict[str, object]:
        return {
            "type": str(self.type),
            "id": self.id,
            "signedTransaction": self.signed_transaction,
            "txJson": _thaw(self.tx_json),
            "signers": list(self.signers),
        }


@dataclass(frozen=True)
class SignedTx(SignedObject):
    type: ClassVar[SignedObjectType] = SignedObjectType.SIGNED_TX


@dataclass(frozen=True)
class MultiSignedTx(SignedObject):
    type: ClassVar[SignedObjectType] = SignedObjectType.MULTI_SIGNED_TX


@dataclass(frozen=True)
class SignedPayChanAuth(SignedObject):
    type: ClassVar[SignedObjectType] = SignedObjectType.SIGNED_PAY_CHAN_AUTH


# =========================================================================
# Assembly
# =========================================================================


def assemble_signed_tx(result: TxSignResult, signer: str) -> SignedTx:
    return SignedTx(
        id=result.id,
        signed_transaction=result.signed_transaction,
        tx_json=result.tx_json,
        signers=(signer,),
    )


def assemble_multi_signed_tx(
    result: CombineResult, tx_json: Mapping[str, Any], signers: Iterable[str]
) -> MultiSignedTx:
    return MultiSignedTx(
        id=result.id,
        signed_transaction=result.signed_transaction,
        tx_json=tx_json,
        signers=tuple(signers),
    )


def assemble_pay_chan_auth(
    signature: str, claim: Mapping[str, str], signer: str
) -> SignedPayChanAuth:
    # Claims have no transaction identifier.
    return SignedPayChanAuth(
        id="",
        signed_transaction=signature,
        tx_json=claim,
        signers=(signer,),
    )
