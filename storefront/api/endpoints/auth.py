"""Authentication API endpoints."""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from storefront.api.deps import get_db
from storefront.schemas import RefreshRequest, Token, UserCreate, UserLogin, UserRead
from storefront.services.auth import AuthService


router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserRead, status_code=status.HTTP_201_CREATED)
def register_user(payload: UserCreate, db: Session = Depends(get_db)) -> UserRead:
    """Register a new buyer account."""

    return AuthService(db).register_user(payload)


@router.post("/login", response_model=Token)
def login(payload: UserLogin, db: Session = Depends(get_db)) -> Token:
    """Authenticate and return JWT tokens."""

    service = AuthService(db)
    user = service.authenticate_user(payload.email, payload.password)
    return service.create_tokens(user)


@router.post("/refresh", response_model=Token)
def refresh(payload: RefreshRequest, db: Session = Depends(get_db)) -> Token:
    return AuthService(db).refresh_tokens(payload.refresh_token)
