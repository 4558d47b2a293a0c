from .contact import CONTACT_FIELDS, ContactInput, ContactRecord, CreatedResponse

__all__ = [
    "CONTACT_FIELDS",
    "ContactInput",
    "ContactRecord",
    "CreatedResponse",
]
