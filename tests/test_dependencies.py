"""
Testes para dependencies (autenticação, etc)
"""
from datetime import timedelta

import pytest
from fastapi import HTTPException
from jose import jwt

from lightbnb.core.config import settings
from lightbnb.core.dependencies import (
    authenticate_user,
    create_access_token,
    get_current_user,
    hash_password,
    verify_password,
)


class TestPasswordVerification:
    """Testes para verificação de senha"""

    def test_verify_password_correct(self):
        hashed = hash_password("test_password")
        assert hashed != "test_password"
        assert verify_password("test_password", hashed) is True

    def test_verify_password_incorrect(self):
        hashed = hash_password("test_password")
        assert verify_password("wrong_password", hashed) is False


class TestAuthentication:
    """Testes para autenticação"""

    @pytest.mark.asyncio
    async def test_authenticate_user_success(self, db_session, make_user):
        make_user(password=hash_password("secret"))
        user = await authenticate_user(db_session, "alice@example.com", "secret")
        assert user is not None
        assert user["email"] == "alice@example.com"

    @pytest.mark.asyncio
    async def test_authenticate_user_wrong_password(self, db_session, make_user):
        make_user(password=hash_password("secret"))
        assert await authenticate_user(db_session, "alice@example.com", "wrong") is None

    @pytest.mark.asyncio
    async def test_authenticate_user_unknown_email(self, db_session):
        assert await authenticate_user(db_session, "nobody@example.com", "secret") is None


class TestCurrentUser:
    """Testes para get_current_user"""

    def test_token_contains_user_id(self):
        token = create_access_token(7)
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        assert payload["sub"] == "7"

    @pytest.mark.asyncio
    async def test_get_current_user_valid_token(self, db_session, make_user):
        created = make_user()
        user = await get_current_user(token=create_access_token(created.id), db=db_session)
        assert user["id"] == created.id

    @pytest.mark.asyncio
    async def test_get_current_user_invalid_token(self, db_session):
        with pytest.raises(HTTPException) as exc_info:
            await get_current_user(token="not-a-token", db=db_session)
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_get_current_user_expired_token(self, db_session, make_user):
        created = make_user()
        token = create_access_token(created.id, expires_delta=timedelta(minutes=-1))
        with pytest.raises(HTTPException) as exc_info:
            await get_current_user(token=token, db=db_session)
        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_get_current_user_deleted_user(self, db_session):
        with pytest.raises(HTTPException) as exc_info:
            await get_current_user(token=create_access_token(999), db=db_session)
        assert exc_info.value.status_code == 401
