"""Rate limiter instance for SlowAPI.

Shared so both main (app.state.limiter) and route modules can use the same
instance without circular imports.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from venuehub.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)

# Resolved per request so tests and deployments can change WRITE_RATE_LIMIT.
limit_writes = limiter.limit(lambda: get_settings().write_rate_limit)
