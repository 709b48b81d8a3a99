"""Domain errors raised by the quote hierarchy store

NotFoundError covers both "does not exist" and "belongs to another company";
callers cannot tell the two apart.
"""

from typing import Optional


class DomainError(Exception):
    code = "DOMAIN_ERROR"

    def __init__(self, message: str, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class ValidationError(DomainError):
    """A required field is missing or malformed"""

    code = "VALIDATION_ERROR"


class UniquenessError(DomainError):
    """A quote already has a line item date on this calendar date"""

    code = "DATE_ALREADY_EXISTS"


class NotFoundError(DomainError):
    """Entity is absent or outside the caller's company"""

    code = "NOT_FOUND"

    def __init__(self, entity: str, entity_id=None):
        message = f"{entity} not found" if entity_id is None else f"{entity} {entity_id} not found"
        super().__init__(message)
        self.entity = entity
        self.entity_id = entity_id
        self.code = f"{_snake_upper(entity)}_NOT_FOUND"


def _snake_upper(name: str) -> str:
    out = []
    for i, ch in enumerate(name):
        if ch.isupper() and i:
            out.append("_")
        out.append(ch.upper())
    return "".join(out)
