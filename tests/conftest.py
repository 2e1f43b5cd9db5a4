"""
Configuração global para testes

Este arquivo é carregado automaticamente pelo pytest antes de qualquer teste.
Ele configura as variáveis de ambiente necessárias e o banco SQLite em memória.
"""
import os
from datetime import date

import pytest

# Configurações padrão para testes - definidas ANTES de qualquer import
TEST_ENV_VARS = {
    "SECRET_KEY": "test_secret_key_for_testing_only",
    "DATABASE_URL": "sqlite:///:memory:",
    "ALGORITHM": "HS256",
    "ACCESS_TOKEN_EXPIRE_MINUTES": "30",
    "ENVIRONMENT": "testing",
    "LOG_LEVEL": "DEBUG",
}

for key, value in TEST_ENV_VARS.items():
    if key not in os.environ:
        os.environ[key] = value

from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from lightbnb.core.database import Base
# Registra todas as tabelas no metadata
from lightbnb.models import property_model, reservation_model, user_model

# StaticPool: uma única conexão, visível também das threads do TestClient
engine = create_engine(
    "sqlite:///:memory:",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session():
    """Cria uma sessão de banco de dados para cada teste"""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def make_user(db_session):
    def _make_user(name="Alice", email="alice@example.com", password="password"):
        user = user_model.User(name=name, email=email, password=password)
        db_session.add(user)
        db_session.commit()
        return user
    return _make_user


@pytest.fixture(scope="function")
def make_property(db_session):
    def _make_property(owner, title="Casa", city="Vancouver", cost_per_night=10000, **kwargs):
        values = {
            "owner_id": owner.id,
            "title": title,
            "description": "desc",
            "thumbnail_photo_url": "https://example.com/thumb.jpg",
            "cover_photo_url": "https://example.com/cover.jpg",
            "cost_per_night": cost_per_night,
            "parking_spaces": 1,
            "number_of_bathrooms": 1,
            "number_of_bedrooms": 2,
            "country": "Canada",
            "street": "Main St",
            "city": city,
            "province": "BC",
            "post_code": "V5K0A1",
            "active": True,
        }
        values.update(kwargs)
        prop = property_model.Property(**values)
        db_session.add(prop)
        db_session.commit()
        return prop
    return _make_property


@pytest.fixture(scope="function")
def make_review(db_session):
    def _make_review(prop, rating, guest=None):
        review = property_model.PropertyReview(
            property_id=prop.id,
            guest_id=guest.id if guest else None,
            rating=rating,
        )
        db_session.add(review)
        db_session.commit()
        return review
    return _make_review


@pytest.fixture(scope="function")
def make_reservation(db_session):
    def _make_reservation(guest, prop, start_date=date(2024, 1, 1)):
        reservation = reservation_model.Reservation(
            guest_id=guest.id,
            property_id=prop.id,
            start_date=start_date,
        )
        db_session.add(reservation)
        db_session.commit()
        return reservation
    return _make_reservation


def override_get_db():
    """Override da dependência get_db para testes"""
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(scope="function")
def client(db_session):
    """Cria um cliente de teste"""
    from fastapi.testclient import TestClient
    from lightbnb.core.dependencies import get_db
    from lightbnb.main import app

    app.dependency_overrides[get_db] = override_get_db
    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        app.dependency_overrides.clear()
