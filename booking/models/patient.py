# models/patient.py

from typing import Any

from pydantic import BaseModel, Field


class PatientCreateRequest(BaseModel):
	name: str = Field(min_length=1)
	phone: str = Field(min_length=1)
	email: str = Field(min_length=1)

class PatientUpdate(BaseModel):
	"""Partial update; a field left as None is not touched."""
	name: str | None = None
	phone: str | None = None
	email: str | None = None

	def to_set(self) -> dict[str, Any]:
		"""The `$set` payload: only the supplied fields, never the id."""
		return {k: v for k, v in self.model_dump().items() if v is not None}

class Patient(BaseModel):
	id: str
	name: str
	phone: str
	email: str

	@classmethod
	def from_document(cls, doc: dict[str, Any]) -> "Patient":
		return cls(
			id=str(doc["_id"]),
			name=doc.get("name", ""),
			phone=doc.get("phone", ""),
			email=doc.get("email", "")
		)
