"""Application-wide constants (statuses, roles, field names)."""

STATUS_ACTIVE = "active"
STATUS_INACTIVE = "inactive"

# Firestore field names shared by the cached content kinds.
FIELD_STATUS = "status"
FIELD_ORDER = "order"
FIELD_CREATED_ON = "createdOn"
FIELD_UPDATED_ON = "updatedOn"
# Enquiries and role profiles use the *At spelling.
FIELD_CREATED_AT = "createdAt"
FIELD_UPDATED_AT = "updatedAt"

# Fixed document id of the hero-extension content singleton.
HERO_EXTENSION_CONTENT_ID = "content"
HERO_EXTENSION_CONTENT_TYPE = "content"
