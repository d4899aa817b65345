"""
Caller identity resolution.

There is no authentication layer yet: every request acts as the configured
default user. Routes depend on get_current_user so a real resolver can replace
this one without touching them.
"""

from webinar_api.core.config import get_settings
from webinar_api.domain.user import User


def get_current_user() -> User:
    settings = get_settings()
    return User(id=settings.DEFAULT_USER_ID, email=settings.DEFAULT_USER_EMAIL)
