# api/routes/system.py

import time

from fastapi import APIRouter, Request

from booking.data.connection import ping

router = APIRouter(prefix="/system", tags=["System"])

@router.get("/health")
def health_check(request: Request):
	"""Health check endpoint"""
	database_up = ping(request.app.state.database)
	return {
		"status": "healthy" if database_up else "degraded",
		"timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
		"components": {
			"database": "operational" if database_up else "unreachable"
		}
	}

@router.get("/database")
def get_database(request: Request):
	"""Document count and indexes for each collection the service uses."""
	collections = [
		request.app.state.patient_operations.patients,
		request.app.state.appointment_operations.appointments
	]

	result = {}
	for collection in collections:
		indexes = []
		for idx in collection.list_indexes():
			indexes.append({
				"name": idx["name"],
				"keys": list(idx["key"].items()),
				"unique": bool(idx.get("unique", False))
			})
		result[collection.name] = {
			"document_count": collection.estimated_document_count(),
			"indexes": indexes
		}

	return {
		"timestamp": time.strftime("%Y-%m-%d %H:%M:%S"),
		"collections": result
	}
