# data/repositories/appointment.py
"""
Appointment documents.

## Fields
	_id: ObjectId assigned on insert
	patient: ObjectId of the referenced patient (not embedded)
	date: When the appointment takes place, stored as a BSON date
	type: Free-text category, e.g. "checkup"
"""

from datetime import datetime
from typing import Any

from bson import ObjectId
from pymongo import ASCENDING
from pymongo.collection import Collection

from booking.utils.logger import logger


def create_indexes(collection: Collection) -> None:
	"""One appointment per patient per date."""
	collection.create_index(
		[("patient", ASCENDING), ("date", ASCENDING)],
		unique=True,
		name="patient_date_unique"
	)
	logger(tag="indexes").info(f"Ensured indexes on '{collection.name}'")

def new_appointment_document(
	patient_id: ObjectId,
	date: datetime,
	type_: str
) -> dict[str, Any]:
	return {"patient": patient_id, "date": date, "type": type_}

def slot_filter(patient_id: ObjectId, date: datetime) -> dict[str, Any]:
	return {"patient": patient_id, "date": date}
