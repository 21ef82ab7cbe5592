"""Firestore-backed application services."""

from venuehub.infrastructure.firebase.services.auth_sync_firestore import (
    FirestoreAuthSynchronizer,
)

__all__ = ["FirestoreAuthSynchronizer"]
