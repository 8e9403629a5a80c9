# data/connection.py

from pymongo import MongoClient
from pymongo.database import Database

from booking.config.settings import get_settings
from booking.utils.logger import logger

_mongo_client: MongoClient | None = None

def get_client() -> MongoClient:
	"""Returns the shared MongoClient, creating it on first use."""
	global _mongo_client
	if _mongo_client is None:
		settings = get_settings()
		try:
			logger(tag="mongo").info("Initializing MongoDB connection.")
			_mongo_client = MongoClient(settings.MONGO_URL, tz_aware=False)
		except Exception as e:
			logger(tag="mongo").error(f"Failed to connect to MongoDB: {e}")
			raise
	return _mongo_client

def get_database(db_name: str | None = None) -> Database:
	"""Gets the configured database, or `db_name` when given."""
	return get_client()[db_name or get_settings().MONGO_DB]

def ping(database: Database | None = None) -> bool:
	"""True when the server behind `database` (default: the shared client) answers a ping."""
	try:
		if database is None:
			database = get_database()
		database.command("ping")
		return True
	except Exception as e:
		logger(tag="mongo").warning(f"MongoDB ping failed: {e}")
		return False

def close_connection():
	"""Closes the MongoDB connection."""
	global _mongo_client
	if _mongo_client:
		logger(tag="mongo").info("Closing MongoDB connection.")
		_mongo_client.close()
		_mongo_client = None
