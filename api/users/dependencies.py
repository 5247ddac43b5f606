"""
FastAPI providers wiring the user service to the request's database.
"""

from __future__ import annotations

from fastapi import Depends
from motor.motor_asyncio import AsyncIOMotorDatabase

from core import db

from .repository import UserRepository
from .service import UserService


def get_user_repository(database: AsyncIOMotorDatabase = Depends(db.get_database)) -> UserRepository:
    return UserRepository(database[db.USERS])


def get_user_service(users: UserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(users)
