"""
API Dependencies

Provides dependency injection for services, settings and database sessions.
"""

import re
from typing import Optional

from fastapi import Depends, Request
from pydantic import ValidationError
from sqlalchemy.orm import Session

from product_api.core.config import Settings
from product_api.db.session import get_db
from product_api.infrastructure.exceptions import InvalidPayloadError, InvalidProductIDError
from product_api.schemas.product import ProductPayload
from product_api.services import ProductService

PRODUCT_ID_PATTERN = re.compile(r"[0-9]+")
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
MAX_PRODUCT_ID = 2 ** 63 - 1

MAX_COUNT = 10
DEFAULT_COUNT = 10
DEFAULT_START = 0


def get_settings(request: Request) -> Settings:
    """Settings the running app was created with."""
    return request.app.state.settings


def get_product_service(db: Session = Depends(get_db)) -> ProductService:
    """
    Get Product Service instance with database session

    Returns:
        ProductService: Configured product service
    """
    return ProductService(db=db)


def parse_int(value: Optional[str]) -> Optional[int]:
    """Parse an optionally signed decimal integer; ``None`` if it is not one."""
    if value is None or not INTEGER_PATTERN.fullmatch(value):
        return None
    return int(value)


def clamp_count(value: Optional[str]) -> int:
    count = parse_int(value)
    if count is None or count < 1 or count > MAX_COUNT:
        return DEFAULT_COUNT
    return count


def clamp_start(value: Optional[str]) -> int:
    start = parse_int(value)
    if start is None or start < 0:
        return DEFAULT_START
    return start


def product_id_path(product_id: str) -> int:
    """
    Validate the ``{product_id}`` path segment.

    Raises:
        InvalidProductIDError: not all digits, or too large for a 64-bit id
    """
    if not PRODUCT_ID_PATTERN.fullmatch(product_id):
        raise InvalidProductIDError()
    value = int(product_id)
    if value > MAX_PRODUCT_ID:
        raise InvalidProductIDError()
    return value


async def product_payload(request: Request) -> ProductPayload:
    """
    Decode and validate the JSON request body.

    Raises:
        InvalidPayloadError: body is not JSON or does not match ``ProductPayload``
    """
    body = await request.body()
    try:
        return ProductPayload.model_validate_json(body)
    except ValidationError as e:
        raise InvalidPayloadError() from e
