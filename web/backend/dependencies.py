#!/usr/bin/env python3
"""
FastAPI dependencies for dependency injection.

The AppContext built at startup lives on app.state; dependencies read it
from the request instead of a module-level database manager.
"""

from typing import Generator
from fastapi import Request
from sqlalchemy.orm import Session

from core.app_context import AppContext
from core.templates.service import ContractRenderer


def get_context(request: Request) -> AppContext:
    return request.app.state.context


def get_db(request: Request) -> Generator[Session, None, None]:
    """
    FastAPI dependency that yields a database session.

    Commits when the request handler returns, rolls back on error.

    Usage:
        @router.get("/endpoint")
        def my_endpoint(db: Session = Depends(get_db)):
            ...
    """
    with get_context(request).database.session_scope() as session:
        yield session


def get_renderer(request: Request) -> ContractRenderer:
    return get_context(request).renderer
