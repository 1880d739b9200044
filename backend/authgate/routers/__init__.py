"""
API Routers module.
"""
from authgate.routers import auth, health, users

__all__ = ["auth", "health", "users"]
