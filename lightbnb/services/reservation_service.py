from typing import Any, Dict, List, Optional

from sqlalchemy import text
from sqlalchemy.orm import Session

from lightbnb.core.errors import resolve_none_on_error

RESERVATIONS_QUERY = text("""
    SELECT properties.*,
           reservations.id AS reservation_id,
           reservations.start_date,
           avg(property_reviews.rating) AS average_rating
    FROM reservations
    JOIN properties ON reservations.property_id = properties.id
    JOIN property_reviews ON properties.id = property_reviews.property_id
    WHERE reservations.guest_id = :guest_id
    GROUP BY properties.id, reservations.id
    ORDER BY reservations.start_date
    LIMIT :limit
""")


@resolve_none_on_error
def get_all_reservations(
    db: Session,
    guest_id: int,
    limit: int = 10
) -> Optional[List[Dict[str, Any]]]:
    """Reservas de um hóspede, da mais antiga para a mais recente"""
    result = db.execute(RESERVATIONS_QUERY, {"guest_id": guest_id, "limit": limit})
    return [dict(row._mapping) for row in result]
