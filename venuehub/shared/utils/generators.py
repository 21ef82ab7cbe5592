"""Document id generation."""

from cuid2 import cuid_wrapper

_next_cuid = cuid_wrapper()


def new_document_id() -> str:
    """Return a fresh CUID2 for a Firestore document created without an explicit id."""
    return _next_cuid()
