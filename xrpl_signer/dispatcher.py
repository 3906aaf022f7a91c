"""
Signing dispatcher: the entry point.

    sign(transaction, credentials=None, definitions=None) -> SignedObject

Flow:
    1. Resolve arguments into a closed ``SigningInput`` (owned copy).
    2. Classify: sign-in normalization, then claim / single / multi.
    3. Route to ``authorize_claim``, ``sign_single``, or the multi-sign
       combiner (pre-signed partials or sign-then-combine).
    4. Return the assembled ``SignedObject``.

Every precondition is checked before the codec is called. Nothing is
caught here: precondition errors and codec errors both reach the caller,
and no signed artifact exists when an error is raised.

``SigningDispatcher`` takes its codec at construction. The module-level
``sign()`` uses a lazily built dispatcher over ``XrplCodec`` configured
from ``SignerSettings``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

from xrpl_signer.claim import authorize_claim
from xrpl_signer.classify import (
    InputShape,
    SigningCategory,
    classify,
    resolve_input,
)
from xrpl_signer.codec import LedgerCodec
from xrpl_signer.config import get_settings
from xrpl_signer.credential import AccountCredential
from xrpl_signer.multisign import combine_partials, sign_and_combine
from xrpl_signer.signed import SignedObject
from xrpl_signer.single import sign_single
from xrpl_signer.xrpl_codec import XrplCodec

logger = logging.getLogger(__name__)


class SigningDispatcher:
    """Routes a signing request to the right procedure.

    Args:
        codec: Collaborator implementing every codec protocol.
        strict_combine: Reject partial signatures over different
            transactions instead of combining them blindly.
        default_definitions: Definitions used when a call passes none.
    """

    def __init__(
        self,
        codec: LedgerCodec,
        *,
        strict_combine: bool = False,
        default_definitions: Any = None,
    ) -> None:
        self._codec = codec
        self._strict_combine = strict_combine
        self._default_definitions = default_definitions

    def sign(
        self,
        transaction: Mapping[str, Any] | Sequence[object],
        credentials: AccountCredential | Sequence[AccountCredential] | None = None,
        definitions: Any = None,
    ) -> SignedObject:
        """Sign, authorize, or combine, depending on the request.

        Args:
            transaction: Transaction fields, or (without credentials) a
                list of partial signatures to combine.
            credentials: One credential or a list of credentials.
            definitions: Protocol definitions passed through to the codec.

        Raises:
            InvalidCredentialType: A credential is not an AccountCredential.
            SignAsNotAllowedForClaim: Delegated credential on a claim.
            MultiSignNotSupportedForClaim: Claim without exactly one credential.
            InvalidMultiSignInput: Unusable multi-sign input.
            MismatchedPartialSignatures: Strict mode, unrelated partials.
        """
        if definitions is None:
            definitions = self._default_definitions

        signing_input = resolve_input(transaction, credentials)
        category = classify(signing_input)
        logger.debug(
            f"Signing request: shape={signing_input.shape}, category={category}, "
            f"credentials={len(signing_input.credentials)}"
        )

        codec = self._codec
        result: SignedObject
        if category is SigningCategory.PAYMENT_CHANNEL_CLAIM:
            result = authorize_claim(
                signing_input.transaction,
                signing_input.credentials,
                encoder=codec,
                signer=codec,
            )
        elif category is SigningCategory.SINGLE_SIGN:
            result = sign_single(
                signing_input.transaction,
                signing_input.credentials[0],
                codec,
                definitions=definitions,
            )
        elif signing_input.shape is InputShape.PRE_SIGNED_BLOBS:
            result = combine_partials(
                signing_input.partials,
                combiner=codec,
                decoder=codec,
                definitions=definitions,
                strict=self._strict_combine,
            )
        else:
            result = sign_and_combine(
                signing_input.transaction,
                signing_input.credentials,
                signer=codec,
                combiner=codec,
                decoder=codec,
                definitions=definitions,
                strict=self._strict_combine,
            )

        logger.info(f"Produced {result.type} id={result.id or '-'} signers={len(result.signers)}")
        return result


_default_dispatcher: SigningDispatcher | None = None


def get_dispatcher() -> SigningDispatcher:
    """Get the shared dispatcher over the xrpl-py codec."""
    global _default_dispatcher

    if _default_dispatcher is None:
        settings = get_settings()
        _default_dispatcher = SigningDispatcher(
            XrplCodec(),
            strict_combine=settings.strict_combine,
        )
    return _default_dispatcher


def reset_dispatcher() -> None:
    """Drop the shared dispatcher (for testing)."""
    global _default_dispatcher
    _default_dispatcher = None


def sign(
    transaction: Mapping[str, Any] | Sequence[object],
    credentials: AccountCredential | Sequence[AccountCredential] | None = None,
    definitions: Any = None,
) -> SignedObject:
    """Sign with the shared dispatcher. See ``SigningDispatcher.sign``."""
    return get_dispatcher().sign(transaction, credentials, definitions)
