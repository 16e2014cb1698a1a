"""
Base class for Firestore-backed repositories.

Repositories translate between Firestore documents (camelCase dicts) and the
dataclass entities in each app's `models.py`. They hold no business rules.
"""

import logging
from typing import Iterable

from google.cloud.firestore_v1.base_query import FieldFilter

from apps.core import firebase
from apps.core.models import DocumentDecodeError

logger = logging.getLogger(__name__)

# Firestore rejects batches with more than 500 writes
MAX_BATCH_WRITES = 500


class FirestoreRepository:
    """
    CRUD and equality queries over one collection.

    Subclasses set `collection_name` and `model`; the model must provide
    `from_document(doc_id, data)` and `to_document()`.
    """

    collection_name: str = None
    model = None

    def __init__(self, client=None):
        self._client = client

    @property
    def client(self):
        if self._client is None:
            return firebase.get_firestore_client()
        return self._client

    @property
    def collection(self):
        return self.client.collection(self.collection_name)

    def _to_entity(self, snapshot):
        return self.model.from_document(snapshot.id, snapshot.to_dict() or {})

    def _decode_all(self, snapshots) -> list:
        """Decode query results, skipping documents that do not fit the model."""
        entities = []
        for snapshot in snapshots:
            try:
                entities.append(self._to_entity(snapshot))
            except DocumentDecodeError as e:
                logger.warning("Skipping %s/%s: %s", self.collection_name, snapshot.id, e)
        return entities

    def get(self, doc_id: str):
        """Return the entity with this document id, or None.

        Raises:
            DocumentDecodeError: If the stored document does not fit the model
        """
        if not doc_id:
            return None
        snapshot = self.collection.document(doc_id).get()
        if not snapshot.exists:
            return None
        return self._to_entity(snapshot)

    def exists(self, doc_id: str) -> bool:
        if not doc_id:
            return False
        return self.collection.document(doc_id).get().exists

    def add(self, entity) -> str:
        """Store a new entity under an auto-generated id and return the id."""
        ref = self.collection.document()
        ref.set(entity.to_document())
        return ref.id

    def set(self, doc_id: str, entity) -> None:
        self.collection.document(doc_id).set(entity.to_document())

    def update(self, doc_id: str, fields: dict) -> None:
        """Merge `fields` (camelCase keys) into an existing document."""
        self.collection.document(doc_id).update(fields)

    def delete(self, doc_id: str) -> None:
        self.collection.document(doc_id).delete()

    def all(self) -> list:
        return self._decode_all(self.collection.stream())

    def filter(self, limit: int = None, **conditions) -> list:
        """Return entities whose fields equal every given value."""
        query = self.collection
        for field, value in conditions.items():
            query = query.where(filter=FieldFilter(field, '==', value))
        if limit is not None:
            query = query.limit(limit)
        return self._decode_all(query.stream())

    def first(self, **conditions):
        results = self.filter(limit=1, **conditions)
        return results[0] if results else None

    def delete_all(self, doc_ids: Iterable[str], extra_refs: Iterable = ()) -> int:
        """
        Delete documents of this collection, plus any extra document refs,
        in write batches. Returns how many documents of this collection
        were deleted.
        """
        refs = [self.collection.document(doc_id) for doc_id in doc_ids]
        count = len(refs)
        refs.extend(extra_refs)

        for start in range(0, len(refs), MAX_BATCH_WRITES):
            batch = self.client.batch()
            for ref in refs[start:start + MAX_BATCH_WRITES]:
                batch.delete(ref)
            batch.commit()

        logger.debug("Batch-deleted %d %s documents", count, self.collection_name)
        return count
