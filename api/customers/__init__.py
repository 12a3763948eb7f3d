"""
Customer records: CRUD over the `customers` table.
"""
