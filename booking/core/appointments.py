# core/appointments.py

from typing import Any, Iterable

from bson import ObjectId
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from booking.core.errors import Conflict
from booking.core.validation import parse_date, require_text, to_object_id
from booking.data.repositories.appointment import (new_appointment_document,
                                                   slot_filter)
from booking.models.appointment import Appointment
from booking.models.patient import Patient
from booking.utils.logger import logger


class AppointmentOperations:
	"""
	Appointment booking, listing and cancellation.

	`patients` is only ever read, to expand each appointment's patient
	reference. Whether the referenced patient exists is not checked on booking.
	"""

	def __init__(self, appointments: Collection, patients: Collection):
		self.appointments = appointments
		self.patients = patients

	def get_appointments(self) -> list[Appointment]:
		docs = list(self.appointments.find())
		patients = self._load_patients(doc.get("patient") for doc in docs)
		return [
			Appointment.from_document(doc, patients.get(doc.get("patient")))
			for doc in docs
		]

	def add_appointment(self, patient_ref: str, date: str, type_: str) -> Appointment:
		patient_id = to_object_id(patient_ref, what="patient id")
		when = parse_date(date)
		require_text(type=type_)

		if self.appointments.find_one(slot_filter(patient_id, when)):
			raise Conflict("duplicate appointment for patient/date")

		doc = new_appointment_document(patient_id, when, type_)
		try:
			result = self.appointments.insert_one(doc)
		except DuplicateKeyError:
			logger(tag="appointments").warning("Duplicate appointment caught by unique index")
			raise Conflict("duplicate appointment for patient/date") from None

		logger(tag="appointments").info(
			f"Booked appointment id={result.inserted_id} patient={patient_id} date={when.isoformat()}"
		)
		patients = self._load_patients([patient_id])
		return Appointment.from_document(
			{**doc, "_id": result.inserted_id},
			patients.get(patient_id)
		)

	def delete_appointment(self, appointment_id: str) -> bool:
		oid = to_object_id(appointment_id, what="appointment id")
		result = self.appointments.delete_one({"_id": oid})
		if result.deleted_count == 0:
			logger(tag="appointments").info(f"No appointment to delete id={oid}")
			return False
		logger(tag="appointments").info(f"Deleted appointment id={oid}")
		return True

	def _load_patients(self, ids: Iterable[Any]) -> dict[ObjectId, Patient]:
		"""One `$in` lookup for every referenced patient. Missing ids are simply absent."""
		wanted = {pid for pid in ids if pid is not None}
		if not wanted:
			return {}
		found = self.patients.find({"_id": {"$in": list(wanted)}})
		return {doc["_id"]: Patient.from_document(doc) for doc in found}
