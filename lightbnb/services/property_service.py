import logging
from typing import Any, Dict, List, Optional

from sqlalchemy import text
from sqlalchemy.orm import Session

from lightbnb.core.database import as_record
from lightbnb.core.errors import resolve_none_on_error
from lightbnb.models import property_model
from lightbnb.schemas import property_schema
from lightbnb.services.property_query import build_property_query

logger = logging.getLogger(__name__)


@resolve_none_on_error
def get_all_properties(
    db: Session,
    options: property_schema.PropertyFilters,
    limit: int
) -> Optional[List[Dict[str, Any]]]:
    query = build_property_query(options, limit)
    logger.debug(f"Parâmetros: {query.params}")
    logger.debug(f"SQL: {query.sql}")

    result = db.execute(text(query.sql), query.bind_params)
    return [dict(row._mapping) for row in result]


@resolve_none_on_error
def add_property(
    db: Session,
    property_in: property_schema.PropertyCreate
) -> Optional[Dict[str, Any]]:
    db_property = property_model.Property(**property_in.with_defaults())
    db.add(db_property)
    db.commit()
    db.refresh(db_property)
    return as_record(db_property)
