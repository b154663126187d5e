"""
Per-domain repository modules for database access.

Each module takes an explicit `Session` and commits its own unit of work,
so a request maps to a single transaction.
"""
