"""
Base for Firestore-backed entities.

Entities are dataclasses with snake_case attributes; their documents use the
camelCase names the mobile client sends and reads.
"""

from dataclasses import fields
from enum import Enum


def to_camel(name: str) -> str:
    """event_date -> eventDate"""
    first, *rest = name.split('_')
    return first + ''.join(part.capitalize() for part in rest)


class DocumentDecodeError(ValueError):
    """Raised when a stored document cannot be turned into an entity."""

    def __init__(self, model_name: str, doc_id: str, reason: str):
        self.model_name = model_name
        self.doc_id = doc_id
        super().__init__(f"Cannot decode {model_name} {doc_id}: {reason}")


class FirestoreDocument:
    """Mixin mapping a dataclass to and from a Firestore document."""

    # Attribute holding the document id; it is not stored inside the document
    id_field = 'id'

    def to_document(self) -> dict:
        document = {}
        for field in fields(self):
            if field.name == self.id_field:
                continue
            value = getattr(self, field.name)
            document[to_camel(field.name)] = value.value if isinstance(value, Enum) else value
        return document

    @classmethod
    def from_document(cls, doc_id: str, data: dict):
        values = {}
        for field in fields(cls):
            key = to_camel(field.name)
            if field.name != cls.id_field and key in data:
                values[field.name] = data[key]
        values[cls.id_field] = doc_id
        try:
            return cls(**values)
        except TypeError as e:
            # Missing required fields, e.g. profiles from the older flat model
            raise DocumentDecodeError(cls.__name__, doc_id, str(e)) from e
