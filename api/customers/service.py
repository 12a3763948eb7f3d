"""
Customer business logic.

Each write issues exactly one statement and then re-reads the collection.
Updates and deletes that match no row are not errors.
"""

from __future__ import annotations

import logging

from . import repository
from .schemas import Customer, CustomerIn

logger = logging.getLogger(__name__)


def _rows_affected(status: str) -> int:
    # Postgres command tags look like "UPDATE 3" / "DELETE 0".
    try:
        return int(status.rsplit(" ", 1)[-1])
    except (AttributeError, ValueError):
        return 0


async def all_customers() -> list[Customer]:
    rows = await repository.list_customers()
    return [Customer(id=int(row["id"]), name=str(row["name"]), email=str(row["email"])) for row in rows]


async def create_customer(customer: CustomerIn) -> list[Customer]:
    row = await repository.insert_customer(name=customer.name, email=customer.email)
    logger.info("customer_created id=%s", row["id"])
    return await all_customers()


async def update_customer(customer_id: int, customer: CustomerIn) -> list[Customer]:
    status = await repository.update_customer(customer_id, name=customer.name, email=customer.email)
    if _rows_affected(status) == 0:
        logger.info("customer_update_noop id=%s", customer_id)
    return await all_customers()


async def delete_customer(customer_id: int) -> None:
    status = await repository.delete_customer(customer_id)
    logger.info("customer_delete id=%s deleted=%s", customer_id, _rows_affected(status))
