"""
Customer persistence (raw SQL).
"""

from __future__ import annotations

from core import db


async def ensure_schema() -> None:
    await db.execute(
        """
        CREATE TABLE IF NOT EXISTS customers (
            id SERIAL PRIMARY KEY,
            name TEXT NOT NULL,
            email TEXT NOT NULL
        )
        """
    )


async def insert_customer(*, name: str, email: str) -> dict:
    row = await db.fetch_one(
        """
        INSERT INTO customers (name, email)
        VALUES ($1, $2)
        RETURNING id, name, email
        """,
        name,
        email,
    )
    if row is None:
        raise RuntimeError("Failed to insert customer.")
    return row


async def list_customers() -> list[dict]:
    # No ORDER BY: callers must not rely on row order.
    return await db.fetch_all(
        """
        SELECT id, name, email
        FROM customers
        """
    )


async def update_customer(customer_id: int, *, name: str, email: str) -> str:
    return await db.execute(
        """
        UPDATE customers
        SET name = $1,
            email = $2
        WHERE id = $3
        """,
        name,
        email,
        customer_id,
    )


async def delete_customer(customer_id: int) -> str:
    return await db.execute(
        """
        DELETE FROM customers
        WHERE id = $1
        """,
        customer_id,
    )
