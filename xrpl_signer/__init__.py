"""
XRPL transaction-signing dispatcher.

Public API:

    Entry point:
        - ``sign()``: sign, authorize a channel claim, or combine
          multi-signatures, depending on the request.
        - ``SigningDispatcher``: the same, with an injected codec.

    Inputs:
        - ``AccountCredential``, ``Keypair``: who is signing.

    Results:
        - ``SignedObject`` and its variants ``SignedTx``,
          ``MultiSignedTx``, ``SignedPayChanAuth``.
        - ``validate_signed_object()``: JSON Schema check of ``to_dict()``.

    Protocols (for dependency injection):
        - ``LedgerCodec`` and its parts ``ClaimEncoder``, ``BytesSigner``,
          ``TxSigner``, ``BlobCombiner``, ``BlobDecoder``.
        - ``XrplCodec``: xrpl-py implementation.

    Errors:
        - ``SigningError`` and subclasses, each with a ``SignErrorCode``.
"""

from xrpl_signer.classify import InputShape, SigningCategory
from xrpl_signer.codec import (
    BlobCombiner,
    BlobDecoder,
    BytesSigner,
    ClaimEncoder,
    CombineResult,
    LedgerCodec,
    TxSigner,
    TxSignResult,
)
from xrpl_signer.credential import AccountCredential, Keypair
from xrpl_signer.dispatcher import SigningDispatcher, sign
from xrpl_signer.errors import (
    InvalidCredentialType,
    InvalidMultiSignInput,
    MismatchedPartialSignatures,
    MultiSignNotSupportedForClaim,
    SignAsNotAllowedForClaim,
    SignErrorCode,
    SigningError,
)
from xrpl_signer.schema import validate_signed_object
from xrpl_signer.signed import (
    MultiSignedTx,
    SignedObject,
    SignedObjectType,
    SignedPayChanAuth,
    SignedTx,
)
from xrpl_signer.xrpl_codec import XrplCodec

__all__ = [
    "AccountCredential",
    "BlobCombiner",
    "BlobDecoder",
    "BytesSigner",
    "ClaimEncoder",
    "CombineResult",
    "InputShape",
    "InvalidCredentialType",
    "InvalidMultiSignInput",
    "Keypair",
    "LedgerCodec",
    "MismatchedPartialSignatures",
    "MultiSignNotSupportedForClaim",
    "MultiSignedTx",
    "SignAsNotAllowedForClaim",
    "SignErrorCode",
    "SignedObject",
    "SignedObjectType",
    "SignedPayChanAuth",
    "SignedTx",
    "SigningCategory",
    "SigningDispatcher",
    "SigningError",
    "TxSignResult",
    "TxSigner",
    "XrplCodec",
    "sign",
    "validate_signed_object",
]
