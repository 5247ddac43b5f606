"""
Test-support endpoints. Used by end-to-end suites to reset state.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, status
from motor.motor_asyncio import AsyncIOMotorDatabase

from core import db

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/testing")


@router.delete("/all-data", status_code=status.HTTP_204_NO_CONTENT)
async def delete_all_data(database: AsyncIOMotorDatabase = Depends(db.get_database)) -> None:
    for name in db.COLLECTIONS:
        result = await database[name].delete_many({})
        logger.info("collection_purged name=%s deleted=%s", name, result.deleted_count)
