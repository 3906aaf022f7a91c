"""
Account credentials: who is signing.

A credential pairs an XRPL r-address with the key material used by the
signing primitive. Key material is owned by the caller: the dispatcher
reads it, never mutates it, and never logs it.

``sign_as`` marks a delegated signing role: the credential authorizes
on behalf of another account (multi-signing). ``None`` and ``""`` both
mean "sign as self".
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Keypair:
    """Hex-encoded key material, as produced by ``xrpl.core.keypairs``.

    Attributes:
        public_key: Public key hex (33 bytes, ``ED`` prefix for ed25519).
        private_key: Private key hex. Excluded from ``repr()``.
    """

    public_key: str
    private_key: str = field(repr=False)


@dataclass(frozen=True)
class AccountCredential:
    """A signer identity plus its key material.

    Attributes:
        address: Classic r-address of the key owner.
        keypair: Key material used by the signing primitive.
        sign_as: Address this credential signs on behalf of, if any.
    """

    address: str
    keypair: Keypair
    sign_as: str | None = None

    def __post_init__(self) -> None:
        if not self.address:
            raise ValueError("address must be non-empty")

    @property
    def delegated(self) -> bool:
        """True if the credential carries a non-empty sign_as role."""
        return bool(self.sign_as)

    @property
    def signing_identity(self) -> str:
        """The address recorded as signer: sign_as when set, else address."""
        return self.sign_as or self.address
