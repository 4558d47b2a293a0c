"""Contacts CRUD endpoints."""

from __future__ import annotations

from typing import Any, List, Optional, Union

from fastapi import APIRouter, Body, Depends, Query, Response, status

from contactbook.api.dependencies import get_repository
from contactbook.core.exceptions import ConflictError, ValidationError
from contactbook.core.repository import DUPLICATE_EMAIL_MESSAGE, ContactRepository
from contactbook.models.contact import ContactRecord, CreatedResponse
from contactbook.utils.validators import extract_client_id, parse_object_id, validate_contact

router = APIRouter(prefix="/api/contacts", tags=["contacts"])


@router.get("", response_model=Union[List[ContactRecord], ContactRecord])
async def list_contacts(
    contact_id: Optional[str] = Query(None, alias="id"),
    repository: ContactRepository = Depends(get_repository),
) -> Union[List[ContactRecord], ContactRecord]:
    """List every contact, or fetch one when ``?id=`` is given."""

    if contact_id is not None:
        if not contact_id.strip():
            raise ValidationError("Missing id")
        return await repository.get(parse_object_id(contact_id))
    return await repository.list_all()


@router.get("/{contact_id}", response_model=ContactRecord)
async def get_contact(contact_id: str, repository: ContactRepository = Depends(get_repository)) -> ContactRecord:
    return await repository.get(parse_object_id(contact_id))


@router.post("", response_model=CreatedResponse, status_code=status.HTTP_201_CREATED)
async def create_contact(
    payload: Any = Body(None),
    repository: ContactRepository = Depends(get_repository),
) -> CreatedResponse:
    """Create a contact; an optional ``_id`` in the body is used as its id."""

    contact = validate_contact(payload)
    client_id = extract_client_id(payload)

    if await repository.email_exists(contact.email):
        raise ConflictError(DUPLICATE_EMAIL_MESSAGE)

    new_id = await repository.insert(contact, client_id)
    return CreatedResponse(id=new_id)


@router.put("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def replace_contact(
    contact_id: str,
    payload: Any = Body(None),
    repository: ContactRepository = Depends(get_repository),
) -> Response:
    """Overwrite every field of a contact. Partial updates are rejected."""

    object_id = parse_object_id(contact_id)
    contact = validate_contact(payload)
    await repository.replace(object_id, contact)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/{contact_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response)
async def delete_contact(contact_id: str, repository: ContactRepository = Depends(get_repository)) -> Response:
    await repository.delete(parse_object_id(contact_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
