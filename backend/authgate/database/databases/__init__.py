"""
Database definitions and collection constants.
"""
from authgate.database.databases import auth_db

__all__ = ["auth_db"]
