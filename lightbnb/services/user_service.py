from typing import Any, Dict, Optional

from sqlalchemy.orm import Session

from lightbnb.core.database import as_record
from lightbnb.core.errors import resolve_none_on_error
from lightbnb.models import user_model
from lightbnb.schemas import user_schema


@resolve_none_on_error
def get_user_with_email(db: Session, email: str) -> Optional[Dict[str, Any]]:
    user = db.query(user_model.User).filter(user_model.User.email == email).first()
    return as_record(user) if user else None


@resolve_none_on_error
def get_user_with_id(db: Session, user_id: int) -> Optional[Dict[str, Any]]:
    user = db.query(user_model.User).filter(user_model.User.id == user_id).first()
    return as_record(user) if user else None


@resolve_none_on_error
def add_user(db: Session, user_in: user_schema.UserCreate) -> Optional[Dict[str, Any]]:
    # a senha chega aqui já com hash, quem chama é responsável por isso
    db_user = user_model.User(
        name=user_in.name,
        email=user_in.email,
        password=user_in.password,
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return as_record(db_user)
