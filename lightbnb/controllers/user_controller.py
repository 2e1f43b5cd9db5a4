from typing import Any, Dict
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from lightbnb.core.dependencies import (
    authenticate_user,
    create_access_token,
    get_current_user,
    get_db,
    hash_password,
)
from lightbnb.schemas import user_schema
from lightbnb.services import user_service

router = APIRouter(
    prefix="/users",
    tags=["Users"],
)

# Cadastro
@router.post("", response_model=user_schema.UserOut, status_code=status.HTTP_201_CREATED)
def create_user(
    user_in: user_schema.UserCreate,
    db: Session = Depends(get_db)
):
    user_in = user_in.model_copy(update={"password": hash_password(user_in.password)})
    user = user_service.add_user(db, user_in)
    if not user:
        raise HTTPException(status_code=400, detail="Could not create user")
    return user

# Login
@router.post("/login", response_model=user_schema.Token)
async def login(
    credentials: user_schema.LoginRequest,
    db: Session = Depends(get_db)
):
    user = await authenticate_user(db, credentials.email, credentials.password)
    if not user:
        raise HTTPException(
            status_code=401,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"}
        )
    return {
        "access_token": create_access_token(user["id"]),
        "token_type": "bearer",
        "user": user,
    }

@router.get("/me", response_model=user_schema.UserOut)
def read_users_me(
    current_user: Dict[str, Any] = Depends(get_current_user)
):
    return current_user
