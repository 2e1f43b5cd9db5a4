from pydantic import BaseModel, Field, field_validator
from typing import Any, Dict, Optional

DEFAULT_THUMBNAIL_PHOTO_URL = (
    "https://images.pexels.com/photos/1172064/pexels-photo-1172064.jpeg"
    "?auto=compress&cs=tinysrgb&h=350"
)
DEFAULT_COVER_PHOTO_URL = "https://images.pexels.com/photos/1172064/pexels-photo-1172064.jpeg"

# Valor usado para cada campo opcional não informado em PropertyCreate
PROPERTY_DEFAULTS: Dict[str, Any] = {
    "title":               "title",
    "description":         "description",
    "thumbnail_photo_url": DEFAULT_THUMBNAIL_PHOTO_URL,
    "cover_photo_url":     DEFAULT_COVER_PHOTO_URL,
    "cost_per_night":      1000,
    "parking_spaces":      1,
    "number_of_bathrooms": 1,
    "number_of_bedrooms":  1,
    "country":             "Canada",
    "street":              "Homeview Court",
    "city":                "London",
    "province":            "Ontario",
    "post_code":           "N6C6C1",
}


def _blank_to_none(v):
    # formulários HTML mandam "" para campos vazios
    if isinstance(v, str) and not v.strip():
        return None
    return v


class PropertyFilters(BaseModel):
    """Filtros opcionais da busca de imóveis"""
    city:                    Optional[str]   = None
    owner_id:                Optional[int]   = None
    minimum_price_per_night: Optional[float] = Field(None, ge=0)
    maximum_price_per_night: Optional[float] = Field(None, ge=0)
    minimum_rating:          Optional[float] = Field(None, ge=0)

    @field_validator("*", mode="before")
    @classmethod
    def blank_is_missing(cls, v):
        return _blank_to_none(v)


class PropertyBase(BaseModel):
    title:               Optional[str] = None
    description:         Optional[str] = None
    thumbnail_photo_url: Optional[str] = None
    cover_photo_url:     Optional[str] = None
    cost_per_night:      Optional[int] = None
    parking_spaces:      Optional[int] = None
    number_of_bathrooms: Optional[int] = None
    number_of_bedrooms:  Optional[int] = None
    country:             Optional[str] = None
    street:              Optional[str] = None
    city:                Optional[str] = None
    province:            Optional[str] = None
    post_code:           Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def blank_is_missing(cls, v):
        return _blank_to_none(v)


class PropertyCreate(PropertyBase):
    owner_id: int

    def with_defaults(self) -> Dict[str, Any]:
        """
        Valores prontos para o INSERT: cada campo ausente recebe o seu
        valor de PROPERTY_DEFAULTS e o imóvel entra sempre ativo.
        """
        values = self.model_dump()
        for field, default in PROPERTY_DEFAULTS.items():
            if values[field] is None:
                values[field] = default
        values["active"] = True
        return values
