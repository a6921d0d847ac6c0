"""HTTP middleware: timeout, request ID, security headers.

Applied in taskboard.main; order matters (last added = outermost).
"""

from taskboard.middleware.request_id import RequestIDMiddleware
from taskboard.middleware.security_headers import SecurityHeadersMiddleware
from taskboard.middleware.timeout import TimeoutMiddleware

__all__ = [
    "RequestIDMiddleware",
    "SecurityHeadersMiddleware",
    "TimeoutMiddleware",
]
