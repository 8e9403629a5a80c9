# data/repositories/patient.py
"""
Patient documents.

## Fields
	_id: ObjectId assigned on insert
	name: The name of the patient
	phone: Phone number, unique across patients
	email: Email address, unique across patients
"""

from typing import Any

from pymongo import ASCENDING
from pymongo.collection import Collection

from booking.utils.logger import logger


def create_indexes(collection: Collection) -> None:
	"""Unique indexes backing the one-phone, one-email rule."""
	collection.create_index([("phone", ASCENDING)], unique=True, name="phone_unique")
	collection.create_index([("email", ASCENDING)], unique=True, name="email_unique")
	logger(tag="indexes").info(f"Ensured indexes on '{collection.name}'")

def new_patient_document(name: str, phone: str, email: str) -> dict[str, Any]:
	return {"name": name, "phone": phone, "email": email}

def contact_filter(
	*,
	phone: str | None = None,
	email: str | None = None
) -> dict[str, Any]:
	"""Filter matching a patient holding the given phone OR email."""
	clauses = []
	if phone is not None:
		clauses.append({"phone": phone})
	if email is not None:
		clauses.append({"email": email})
	return {"$or": clauses}
