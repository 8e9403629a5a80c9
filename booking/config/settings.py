# config/settings.py

import os


class Settings:
	"""Runtime configuration, read from the environment when instantiated."""

	def __init__(self):
		# Database
		self.MONGO_URL: str = os.getenv("MONGO_URL", "mongodb://127.0.0.1:27017/")
		self.MONGO_DB: str = os.getenv("MONGO_DB", "medico")
		self.PATIENTS_COLLECTION: str = os.getenv("PATIENTS_COLLECTION", "patients")
		self.APPOINTMENTS_COLLECTION: str = os.getenv("APPOINTMENTS_COLLECTION", "appointments")

		# API
		self.APP_NAME: str = "Medico Booking"
		self.CORS_ORIGINS: list[str] = [
			origin.strip()
			for origin in os.getenv("CORS_ORIGINS", "*").split(",")
			if origin.strip()
		]

		# Logging
		self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

def get_settings() -> Settings:
	"""Builds a fresh Settings so values loaded from .env after import are picked up."""
	return Settings()
