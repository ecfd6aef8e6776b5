"""
Infrastructure layer for the tasks service.

This layer contains the implementation details for external systems integration:
- Database (SQLAlchemy asyncio, SQLite by default)
- HTTP transport (FastAPI routers and middleware)

The infrastructure layer implements interfaces defined in the domain layer,
following the Dependency Inversion Principle of Clean Architecture.
"""
