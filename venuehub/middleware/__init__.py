"""HTTP middleware: request context (request/correlation IDs) and security headers.

Applied in main app; first added = outermost.
"""

from venuehub.middleware.request_context import RequestContextMiddleware
from venuehub.middleware.security_headers import SecurityHeadersMiddleware

__all__ = ["RequestContextMiddleware", "SecurityHeadersMiddleware"]
