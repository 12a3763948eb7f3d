"""
Customer CRUD endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Path, Response, status

from . import schemas, service

router = APIRouter(prefix="/api/customers")

# `customers.id` is a SERIAL (int4) column.
INT4_MIN = -(2**31)
INT4_MAX = 2**31 - 1


@router.post("", response_model=list[schemas.Customer])
async def add_customer(customer: schemas.CustomerIn) -> list[schemas.Customer]:
    """
    Insert a customer and return the full collection.
    """
    return await service.create_customer(customer)


@router.get("", response_model=list[schemas.Customer])
async def get_customers() -> list[schemas.Customer]:
    return await service.all_customers()


@router.put("/{customer_id}", response_model=list[schemas.Customer])
async def update_customer(
    customer: schemas.CustomerIn,
    customer_id: int = Path(..., ge=INT4_MIN, le=INT4_MAX),
) -> list[schemas.Customer]:
    """
    Replace name/email of a customer. An unknown id changes nothing and still succeeds.
    """
    return await service.update_customer(customer_id, customer)


@router.delete("/{customer_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_customer(
    customer_id: int = Path(..., ge=INT4_MIN, le=INT4_MAX),
) -> Response:
    await service.delete_customer(customer_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
