"""
Shared slowapi limiter so endpoint modules can decorate routes.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from app.core.config import settings


limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.RATE_LIMIT_ENABLED,
)

REPORT_RATE_LIMIT = f"{settings.RATE_LIMIT_PER_MINUTE}/minute"
