"""
Tratamento uniforme de erros da camada de acesso a dados
"""
import logging
from functools import wraps
from typing import Callable

from sqlalchemy.exc import SQLAlchemyError

logger = logging.getLogger(__name__)


def resolve_none_on_error(func: Callable) -> Callable:
    """
    Decorator para funções de acesso a dados.

    Qualquer SQLAlchemyError (constraint, conexão perdida, SQL inválido) é
    logada, a sessão sofre rollback e a função retorna None. O chamador não
    distingue "não encontrado" de "erro no banco".

    A sessão deve ser o primeiro argumento da função decorada.
    """
    @wraps(func)
    def wrapper(db, *args, **kwargs):
        try:
            return func(db, *args, **kwargs)
        except SQLAlchemyError as e:
            logger.error(f"Erro no banco de dados em {func.__name__}: {e}", exc_info=True)
            try:
                db.rollback()
            except SQLAlchemyError as rollback_error:
                # conexão morta: o rollback também pode falhar
                logger.error(f"Rollback falhou em {func.__name__}: {rollback_error}")
            return None

    return wrapper
