# core/patients.py

from collections.abc import Callable

from pymongo import ReturnDocument
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError

from booking.core.errors import Conflict, InvalidArgument, NotFound
from booking.core.validation import require_text, to_object_id, validate_phone
from booking.data.repositories.patient import (contact_filter,
                                               new_patient_document)
from booking.models.patient import Patient, PatientUpdate
from booking.utils.logger import logger


class PatientOperations:
	"""
	Patient create/fetch/update.

	Phone and email are unique across patients. The check here gives the
	caller a readable error; the unique indexes catch concurrent writers that
	slip past it.
	"""

	def __init__(
		self,
		patients: Collection,
		phone_validator: Callable[[str], bool] = validate_phone
	):
		self.patients = patients
		self.phone_validator = phone_validator

	def get_patient(self, patient_id: str) -> Patient:
		oid = to_object_id(patient_id, what="patient id")
		doc = self.patients.find_one({"_id": oid})
		if not doc:
			raise NotFound("patient not found")
		return Patient.from_document(doc)

	def add_patient(self, name: str, phone: str, email: str) -> Patient:
		require_text(name=name, phone=phone, email=email)
		if self.patients.find_one(contact_filter(phone=phone, email=email)):
			logger(tag="patients").info("Rejected duplicate patient on phone/email")
			raise Conflict("patient already exists")

		doc = new_patient_document(name, phone, email)
		try:
			result = self.patients.insert_one(doc)
		except DuplicateKeyError:
			logger(tag="patients").warning("Duplicate patient caught by unique index")
			raise Conflict("patient already exists") from None

		logger(tag="patients").info(f"Created patient id={result.inserted_id}")
		return Patient.from_document({**doc, "_id": result.inserted_id})

	def update_patient(self, patient_id: str, update: PatientUpdate) -> Patient:
		oid = to_object_id(patient_id, what="patient id")
		current = self.patients.find_one({"_id": oid})
		if not current:
			raise NotFound("patient not found")

		# Checked even when the number is unchanged
		if update.phone is not None and not self.phone_validator(update.phone):
			raise InvalidArgument("invalid phone")

		changes = update.to_set()
		if not changes:
			return Patient.from_document(current)
		require_text(**{field: changes[field] for field in ("name", "email") if field in changes})

		if "phone" in changes or "email" in changes:
			clash = contact_filter(phone=changes.get("phone"), email=changes.get("email"))
			clash["_id"] = {"$ne": oid}
			if self.patients.find_one(clash):
				raise Conflict("another patient already uses this phone or email")

		try:
			doc = self.patients.find_one_and_update(
				{"_id": oid},
				{"$set": changes},
				return_document=ReturnDocument.AFTER
			)
		except DuplicateKeyError:
			raise Conflict("another patient already uses this phone or email") from None
		if not doc:
			raise NotFound("patient not found")

		logger(tag="patients").info(f"Updated patient id={oid} fields={list(changes)}")
		return Patient.from_document(doc)
