# models/appointment.py

from typing import Any

from pydantic import BaseModel, Field

from booking.core.validation import format_date
from booking.models.patient import Patient


class AppointmentCreateRequest(BaseModel):
	patient: str = Field(min_length=1, description="Id of the patient being booked")
	date: str = Field(min_length=1, description="ISO-8601 date or datetime")
	type: str = Field(min_length=1)

class Appointment(BaseModel):
	id: str
	# None when the referenced patient no longer exists
	patient: Patient | None
	date: str
	type: str

	@classmethod
	def from_document(
		cls,
		doc: dict[str, Any],
		patient: Patient | None
	) -> "Appointment":
		return cls(
			id=str(doc["_id"]),
			patient=patient,
			date=format_date(doc["date"]),
			type=doc.get("type", "")
		)

class DeleteResult(BaseModel):
	deleted: bool
