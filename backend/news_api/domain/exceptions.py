"""Domain-specific exceptions — framework-independent."""


class EntityNotFoundError(Exception):
    """Raised when a requested entity does not exist."""

    def __init__(self, entity_type: str, entity_id: int | str):
        self.entity_type = entity_type
        self.entity_id = entity_id
        super().__init__(f"{entity_type} with id '{entity_id}' not found")


class InvalidNewsIdError(ValueError):
    """Raised when a client-supplied news identifier is not well-formed."""

    def __init__(self, raw_id: object):
        self.raw_id = raw_id
        super().__init__(f"'{raw_id}' is not a valid news identifier")


class InvalidQueryError(ValueError):
    """Raised when listing parameters cannot be turned into a query."""

    def __init__(self, parameter: str, value: str, message: str):
        self.parameter = parameter
        self.value = value
        self.message = message
        super().__init__(f"{parameter}={value!r}: {message}")
