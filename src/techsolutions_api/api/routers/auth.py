"""
techsolutions_api.api.routers.auth

Login and token liveness endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends

from techsolutions_api.api.deps import auth_service
from techsolutions_api.api.schemas import LoginRequest, LoginResponse, UserOut, ValidateResponse
from techsolutions_api.auth.deps import get_principal
from techsolutions_api.auth.models import Principal
from techsolutions_api.services.auth_service import AuthService

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/login", response_model=LoginResponse)
async def login(
    body: LoginRequest,
    svc: AuthService = Depends(auth_service),
) -> LoginResponse:
    result = await svc.login(email=body.email, password=body.password)
    return LoginResponse(
        message="Login successful",
        token=result.token,
        user=UserOut.from_view(result.user),
    )


@router.get("/validate", response_model=ValidateResponse)
async def validate_token(principal: Principal = Depends(get_principal)) -> ValidateResponse:
    return ValidateResponse(message="Token is valid", user_id=str(principal.user_id))
