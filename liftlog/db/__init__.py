"""Database package: engine, session factory, request-scoped session."""

from liftlog.db.session import async_session_maker, engine, get_db

__all__ = ["async_session_maker", "engine", "get_db"]
