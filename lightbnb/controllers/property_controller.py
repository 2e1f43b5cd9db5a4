from typing import Any, Dict, Optional
from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import ValidationError
from sqlalchemy.orm import Session

from lightbnb.core.config import settings
from lightbnb.core.dependencies import get_current_user, get_db
from lightbnb.schemas import property_schema
from lightbnb.services import property_service, reservation_service

router = APIRouter(
    prefix="/api",
    tags=["Properties"],
)


@router.get("/properties")
def list_properties(
    city: Optional[str] = None,
    owner_id: Optional[str] = None,
    minimum_price_per_night: Optional[str] = None,
    maximum_price_per_night: Optional[str] = None,
    minimum_rating: Optional[str] = None,
    limit: int = Query(settings.PROPERTIES_LIMIT, ge=1),
    db: Session = Depends(get_db)
):
    # o formulário de busca manda "" nos campos vazios, o schema trata isso
    try:
        options = property_schema.PropertyFilters(
            city=city,
            owner_id=owner_id,
            minimum_price_per_night=minimum_price_per_night,
            maximum_price_per_night=maximum_price_per_night,
            minimum_rating=minimum_rating,
        )
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=e.errors(include_url=False, include_context=False))

    properties = property_service.get_all_properties(db, options, limit)
    # erro no banco e busca vazia chegam iguais ao cliente
    return {"properties": properties or []}


@router.get("/reservations")
def list_reservations(
    db: Session = Depends(get_db),
    current_user: Dict[str, Any] = Depends(get_current_user)
):
    reservations = reservation_service.get_all_reservations(
        db, current_user["id"], settings.RESERVATIONS_LIMIT
    )
    return {"reservations": reservations or []}


@router.post("/properties", status_code=status.HTTP_201_CREATED)
def create_property(
    property_in: property_schema.PropertyBase,
    db: Session = Depends(get_db),
    current_user: Dict[str, Any] = Depends(get_current_user)
):
    # o dono é sempre o usuário logado
    created = property_service.add_property(
        db,
        property_schema.PropertyCreate(**property_in.model_dump(), owner_id=current_user["id"])
    )
    if not created:
        raise HTTPException(status_code=500, detail="Could not create property")
    return created
