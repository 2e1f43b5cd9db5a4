"""
Montagem da consulta de busca de imóveis

A consulta é descrita como uma lista de predicados (coluna, operador,
valores) renderizada em ordem fixa, com placeholders posicionais
:p1, :p2, ... que seguem a ordem da lista de parâmetros:

    1. WHERE  cidade (substring, sem diferenciar maiúsculas)
    2. WHERE  dono
    3. WHERE  faixa de preço (só com mínimo E máximo, convertidos para centavos)
    4. GROUP BY properties.id (sempre)
    5. HAVING avaliação média mínima
    6. ORDER BY cost_per_night, LIMIT (sempre o último parâmetro)

O primeiro predicado presente abre o WHERE e os seguintes entram com AND.
"""
from dataclasses import dataclass
from typing import Any, List, Tuple

from lightbnb.schemas.property_schema import PropertyFilters

BASE_QUERY = (
    "SELECT properties.*, avg(property_reviews.rating) AS average_rating\n"
    "FROM properties\n"
    "LEFT JOIN property_reviews ON properties.id = property_reviews.property_id"
)


@dataclass(frozen=True)
class Predicate:
    column: str
    operator: str
    values: Tuple[Any, ...]

    def render(self, first_index: int) -> str:
        placeholders = [f":p{first_index + i}" for i in range(len(self.values))]
        if self.operator == "BETWEEN":
            return f"{self.column} BETWEEN {placeholders[0]} AND {placeholders[1]}"
        if self.operator == "ILIKE":
            # lower() dos dois lados funciona no Postgres e no SQLite
            return f"lower({self.column}) LIKE lower({placeholders[0]})"
        return f"{self.column} {self.operator} {placeholders[0]}"


@dataclass(frozen=True)
class PropertyQuery:
    sql: str
    params: List[Any]

    @property
    def bind_params(self) -> dict:
        return {f"p{i}": value for i, value in enumerate(self.params, start=1)}


def to_cents(price: float) -> int:
    return int(round(price * 100))


def where_predicates(options: PropertyFilters) -> List[Predicate]:
    predicates: List[Predicate] = []
    # 0 e "" contam como filtro não informado
    if options.city:
        predicates.append(Predicate("city", "ILIKE", (f"%{options.city}%",)))
    if options.owner_id:
        predicates.append(Predicate("owner_id", "=", (options.owner_id,)))
    # faixa de preço só vale com os dois limites
    if options.minimum_price_per_night and options.maximum_price_per_night:
        predicates.append(Predicate(
            "cost_per_night",
            "BETWEEN",
            (to_cents(options.minimum_price_per_night), to_cents(options.maximum_price_per_night)),
        ))
    return predicates


def having_predicates(options: PropertyFilters) -> List[Predicate]:
    if not options.minimum_rating:
        return []
    return [Predicate("avg(property_reviews.rating)", ">=", (options.minimum_rating,))]


def _render_clause(keyword: str, predicates: List[Predicate], params: List[Any]) -> str:
    parts = []
    for predicate in predicates:
        parts.append(predicate.render(len(params) + 1))
        params.extend(predicate.values)
    return f"{keyword} " + " AND ".join(parts)


def build_property_query(options: PropertyFilters, limit: int) -> PropertyQuery:
    """
    Gera o SQL e a lista ordenada de parâmetros da busca de imóveis.

    Args:
        options: filtros opcionais
        limit: número máximo de linhas, sempre o último parâmetro
    """
    params: List[Any] = []
    clauses = [BASE_QUERY]

    where = where_predicates(options)
    if where:
        clauses.append(_render_clause("WHERE", where, params))

    clauses.append("GROUP BY properties.id")

    having = having_predicates(options)
    if having:
        clauses.append(_render_clause("HAVING", having, params))

    params.append(limit)
    clauses.append("ORDER BY cost_per_night")
    clauses.append(f"LIMIT :p{len(params)}")

    return PropertyQuery(sql="\n".join(clauses), params=params)
