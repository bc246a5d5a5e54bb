import hmac
import logging
from typing import Optional

from fastapi import Cookie, HTTPException

from app.core.config import get_settings

logger = logging.getLogger(__name__)

ADMIN_SESSION_COOKIE = "admin_session"


def require_admin(
    admin_session: Optional[str] = Cookie(None, alias=ADMIN_SESSION_COOKIE),
) -> None:
    """Allow the request only when the admin session cookie matches ADMIN_SECRET_KEY."""
    settings = get_settings()

    # No secret configured means nobody is admin.
    if not settings.admin_secret_key:
        logger.warning("ADMIN_SECRET_KEY not set – rejecting admin request")
        raise HTTPException(401, "Unauthorized. Admin access required.")

    if not admin_session or not hmac.compare_digest(
        admin_session.encode("utf-8"), settings.admin_secret_key.encode("utf-8")
    ):
        raise HTTPException(401, "Unauthorized. Admin access required.")
