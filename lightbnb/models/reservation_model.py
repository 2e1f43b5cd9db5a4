from sqlalchemy import Column, Integer, Date, ForeignKey
from lightbnb.core.database import Base

class Reservation(Base):
    __tablename__ = "reservations"

    id          = Column(Integer, primary_key=True, index=True)
    guest_id    = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    property_id = Column(Integer, ForeignKey("properties.id", ondelete="CASCADE"), nullable=False)
    start_date  = Column(Date, nullable=False)
    end_date    = Column(Date)

