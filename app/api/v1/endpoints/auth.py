"""
Authentication endpoints.

Handles player registration, login and the current-user profile.
"""

from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlmodel import Session

from app.api.dependencies import get_current_user
from app.db.session import get_db
from app.models.user import User
from app.schemas.token import Token
from app.schemas.user import UserCreate, UserLogin, UserResponse
from app.services.user_service import UserService

router = APIRouter()


@router.post("/register",
             summary="Player registration endpoint.",
             response_model=UserResponse,
             status_code=status.HTTP_201_CREATED)
def register(user_data: UserCreate, db: Session = Depends(get_db)):
    """
    Register a new player account.

    Raises:
        HTTPException 400: If email already registered
    """
    service = UserService(db)
    return service.register(user_data)


@router.post("/login",
             summary="User login endpoint via OAuth2 form (for Swagger UI).",
             response_model=Token)
def login(form_data: OAuth2PasswordRequestForm = Depends(), db: Session = Depends(get_db)):
    """
    Authenticate user via OAuth2 form (for Swagger UI).

    Use email as username.
    """
    service = UserService(db)
    login_data = UserLogin(email=form_data.username, password=form_data.password)
    return service.authenticate(login_data)


@router.post("/token",
             summary="User login endpoint via Json.",
             response_model=Token)
def login_json(login_data: UserLogin, db: Session = Depends(get_db)):
    service = UserService(db)
    return service.authenticate(login_data)


@router.get("/me",
            summary="Current user with role, department and permissions.",
            response_model=UserResponse)
def me(user: User = Depends(get_current_user)):
    return user
