"""Shared utilities: timestamp normalization, document ids."""

from venuehub.shared.utils.datetime import ensure_utc
from venuehub.shared.utils.generators import new_document_id

__all__ = ["ensure_utc", "new_document_id"]
