"""Admin API for channel linking and task inspection."""

from cobuilder.admin.router import router, verify_admin

__all__ = ["router", "verify_admin"]
