"""
techsolutions_api.auth.models

Authenticated caller identity injected into protected endpoints.
"""

from __future__ import annotations

from dataclasses import dataclass

from techsolutions_api.auth.jwt import TokenClaims


@dataclass(frozen=True, slots=True)
class Principal:
    user_id: int
    email: str
    role: str
    token_id: str

    @classmethod
    def from_claims(cls, claims: TokenClaims) -> Principal:
        return cls(
            user_id=claims.user_id,
            email=claims.email,
            role=claims.role,
            token_id=claims.token_id,
        )
