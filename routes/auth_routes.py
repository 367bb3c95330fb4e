"""
Registration and login routes.
"""

from fastapi import APIRouter, Depends, HTTPException, status

from auth_service import AuthService
from exceptions import AuthenticationError, DuplicateEmailError
from models import UserCreate, UserLogin, UserRecord
from routes.dependencies import get_auth_service

# Create router
auth_router = APIRouter(prefix="/api", tags=["Authentication"])


@auth_router.post("/register", response_model=UserRecord)
def register_user(
    request: UserCreate, auth_service: AuthService = Depends(get_auth_service)
):
    """Register a new user. The password hash is never returned."""
    try:
        user = auth_service.register_user(request)
    except DuplicateEmailError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))

    return UserRecord.model_validate(user)


@auth_router.post("/login", response_model=UserRecord)
def login_user(
    request: UserLogin, auth_service: AuthService = Depends(get_auth_service)
):
    """Check credentials and return the user."""
    try:
        user = auth_service.authenticate_user(request)
    except AuthenticationError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))

    return UserRecord.model_validate(user)
