from pydantic import BaseModel


class Pagination(BaseModel):
    total: int
    limit: int
    offset: int
    has_more: bool


def pagination(*, total: int, limit: int, offset: int, returned: int) -> Pagination:
    return Pagination(total=total, limit=limit, offset=offset, has_more=offset + returned < total)
