from sqlalchemy import Column, Integer, String, Text, Boolean, ForeignKey
from lightbnb.core.database import Base

class Property(Base):
    __tablename__ = "properties"

    id                  = Column(Integer, primary_key=True, index=True)
    owner_id            = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    title               = Column(String(255), nullable=False)
    description         = Column(Text)
    thumbnail_photo_url = Column(String(255), nullable=False)
    cover_photo_url     = Column(String(255), nullable=False)
    cost_per_night      = Column(Integer, nullable=False, default=0)    # em centavos
    parking_spaces      = Column(Integer, nullable=False, default=0)
    number_of_bathrooms = Column(Integer, nullable=False, default=0)
    number_of_bedrooms  = Column(Integer, nullable=False, default=0)
    country             = Column(String(255), nullable=False)
    street              = Column(String(255), nullable=False)
    city                = Column(String(255), nullable=False, index=True)
    province            = Column(String(255), nullable=False)
    post_code           = Column(String(255), nullable=False)
    active              = Column(Boolean, nullable=False, default=True)


class PropertyReview(Base):
    __tablename__ = "property_reviews"

    id             = Column(Integer, primary_key=True, index=True)
    guest_id       = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"))
    property_id    = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False)
    reservation_id = Column(Integer, ForeignKey("reservations.id", ondelete="CASCADE"))
    rating         = Column(Integer, nullable=False, default=0)
    message        = Column(Text)

