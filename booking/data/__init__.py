# data/__init__.py
"""
Data layer for MongoDB: connection management and per-collection setup.
"""

from .connection import close_connection, get_client, get_database, ping

__all__ = [
	"get_database",
	"get_client",
	"close_connection",
	"ping",
]
