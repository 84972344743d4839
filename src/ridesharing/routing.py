"""Navigation guard decision.

Every view except the login view needs an authenticated session.
"""

from __future__ import annotations


def _normalize(path: str) -> str:
    path = path.split("?", 1)[0].split("#", 1)[0]
    if len(path) > 1:
        path = path.rstrip("/")
    return path or "/"


def guard_route(path: str, *, authenticated: bool, login_path: str = "/login") -> str:
    """Return where navigation to *path* should end up.

    The login view is always reachable; anything else redirects to
    *login_path* while unauthenticated.
    """
    if _normalize(path) == _normalize(login_path):
        return path
    if not authenticated:
        return login_path
    return path
