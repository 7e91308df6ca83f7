"""Caller identity entity."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Identity:
    """Verified principal on whose behalf a request is made.

    Built by the caller from an already validated token; only the email
    claim is used here.
    """

    email: str

    def __post_init__(self) -> None:
        if not self.email:
            raise ValueError("Identity email is required")

    @classmethod
    def from_claims(cls, claims: dict) -> "Identity":
        """Build an identity from validated token claims."""
        return cls(email=str(claims.get("email") or ""))
