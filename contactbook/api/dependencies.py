from __future__ import annotations

from fastapi import Request

from contactbook.core.database import ContactStore
from contactbook.core.repository import ContactRepository


def get_store(request: Request) -> ContactStore:
    return request.app.state.store


async def get_repository(request: Request) -> ContactRepository:
    return ContactRepository(get_store(request).collection)
