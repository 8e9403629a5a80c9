#!/usr/bin/env python3
"""
Medico Booking - Startup Script
Checks the environment and starts the API with uvicorn.
"""

import os
import sys

import uvicorn
from dotenv import load_dotenv


def main():
	"""Start the booking API"""
	load_dotenv()
	print("Medico Booking")
	print("=" * 50)

	if not os.path.isdir("booking"):
		print("Error: booking package not found!")
		print("Please run this script from the project root directory.")
		sys.exit(1)

	mongo_url = os.getenv("MONGO_URL")
	if not mongo_url:
		print("Warning: MONGO_URL not set, falling back to mongodb://127.0.0.1:27017/")
	else:
		print("MongoDB connection string found")
	print(f"Database: {os.getenv('MONGO_DB', 'medico')}")

	port = int(os.getenv("PORT", "8000"))
	print(f"\nAPI documentation at: http://localhost:{port}/docs")
	print(f"Health check at: http://localhost:{port}/system/health")
	print("\nPress Ctrl+C to stop the server")
	print("=" * 50)

	uvicorn.run(
		"booking.main:app",
		host="0.0.0.0",
		port=port,
		log_level=os.getenv("LOG_LEVEL", "info").lower(),
		reload=os.getenv("RELOAD", "false").lower() == "true"
	)

if __name__ == "__main__":
	main()
