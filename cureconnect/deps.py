"""Common FastAPI dependencies for consistent type annotations.

Usage:
    from cureconnect.deps import CurrentUser, DbSession

    async def my_endpoint(db: DbSession, user: CurrentUser):
        ...
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from cureconnect.auth import CurrentUser
from cureconnect.config import Settings, get_settings
from cureconnect.database import get_db

DbSession = Annotated[AsyncSession, Depends(get_db)]
AppSettings = Annotated[Settings, Depends(get_settings)]

__all__ = ["AppSettings", "CurrentUser", "DbSession"]
