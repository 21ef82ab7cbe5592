"""Firestore integration over the REST API."""

from venuehub.infrastructure.firebase._rest_client import (
    DocumentExistsError,
    DocumentNotFoundError,
    FirestoreError,
    FirestoreRESTClient,
)
from venuehub.infrastructure.firebase._rest_encoding import SERVER_TIMESTAMP
from venuehub.infrastructure.firebase.client import (
    close_firebase,
    get_firestore_client,
    init_firebase,
)

__all__ = [
    "SERVER_TIMESTAMP",
    "DocumentExistsError",
    "DocumentNotFoundError",
    "FirestoreError",
    "FirestoreRESTClient",
    "close_firebase",
    "get_firestore_client",
    "init_firebase",
]
