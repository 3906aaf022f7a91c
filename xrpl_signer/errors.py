"""
Signing error taxonomy.

Every precondition failure raised by the dispatcher is a ``SigningError``
subclass carrying a machine-readable ``SignErrorCode``. They are raised
before any cryptographic work, so no partial signature is ever produced
alongside an error.

Failures raised by the codec collaborators (malformed fields, invalid
key material) are NOT wrapped. They surface as-is.
"""

from __future__ import annotations

from enum import StrEnum


class SignErrorCode(StrEnum):
    """Error codes for signing precondition failures."""

    INVALID_CREDENTIAL_TYPE = "INVALID_CREDENTIAL_TYPE"
    SIGN_AS_NOT_ALLOWED_FOR_CLAIM = "SIGN_AS_NOT_ALLOWED_FOR_CLAIM"
    MULTI_SIGN_NOT_SUPPORTED_FOR_CLAIM = "MULTI_SIGN_NOT_SUPPORTED_FOR_CLAIM"
    INVALID_MULTI_SIGN_INPUT = "INVALID_MULTI_SIGN_INPUT"
    MISMATCHED_PARTIAL_SIGNATURES = "MISMATCHED_PARTIAL_SIGNATURES"


class SigningError(Exception):
    """Base class for signing precondition failures."""

    code: SignErrorCode

    def __init__(self, detail: str) -> None:
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.code}: {self.detail}"


class InvalidCredentialType(SigningError):
    """A supplied credential is not an AccountCredential."""

    code = SignErrorCode.INVALID_CREDENTIAL_TYPE


class SignAsNotAllowedForClaim(SigningError):
    """A delegated-signing credential was used to authorize a channel claim."""

    code = SignErrorCode.SIGN_AS_NOT_ALLOWED_FOR_CLAIM


class MultiSignNotSupportedForClaim(SigningError):
    """A channel claim was given zero or several credentials."""

    code = SignErrorCode.MULTI_SIGN_NOT_SUPPORTED_FOR_CLAIM


class InvalidMultiSignInput(SigningError):
    """The input for multi-sign combination has an unusable shape."""

    code = SignErrorCode.INVALID_MULTI_SIGN_INPUT


class MismatchedPartialSignatures(SigningError):
    """Partial signatures do not all sign the same transaction (strict mode)."""

    code = SignErrorCode.MISMATCHED_PARTIAL_SIGNATURES
