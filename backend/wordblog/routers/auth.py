"""Auth API router."""

from fastapi import APIRouter, Depends

from wordblog.middleware.auth_middleware import get_current_identity
from wordblog.schemas.auth import IdentityOut
from wordblog.services.ownership import Identity

router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.get("/me", response_model=IdentityOut)
def me(identity: Identity = Depends(get_current_identity)):
    return identity
