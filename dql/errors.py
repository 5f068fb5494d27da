class QueryError(ValueError):
    """base class for errors raised by reducing a result set"""
    pass


class EntityNotFound(QueryError):
    """a reduction found no qualifying item"""

    def __init__(self, message: str = "entity not found"):
        super().__init__(message)


class TooManyEntities(QueryError):
    """a uniqueness reduction found more than one item"""

    def __init__(self, message: str = "too many entities found"):
        super().__init__(message)
