"""API package exports."""
from . import routes_admin, routes_auth

__all__ = [
    "routes_admin",
    "routes_auth",
]
