"""Tests for PatientOperations against an in-memory MongoDB."""

from unittest import mock

from bson import ObjectId

from booking.core.errors import Conflict, InvalidArgument, NotFound
from booking.core.patients import PatientOperations
from booking.models.patient import PatientUpdate
from tests.base import MongoTestCase


class TestAddPatient(MongoTestCase):

	def test_returns_patient_with_fresh_id(self):
		patient = self.patient_ops.add_patient("Ana", "555-1", "a@x.com")

		self.assertTrue(ObjectId.is_valid(patient.id))
		self.assertEqual((patient.name, patient.phone, patient.email), ("Ana", "555-1", "a@x.com"))
		stored = self.patients.find_one({"_id": ObjectId(patient.id)})
		self.assertEqual(stored["email"], "a@x.com")

	def test_ids_are_distinct(self):
		first = self.patient_ops.add_patient("Ana", "600000001", "a@x.com")
		second = self.patient_ops.add_patient("Bea", "600000002", "b@x.com")
		self.assertNotEqual(first.id, second.id)

	def test_same_phone_conflicts(self):
		self.patient_ops.add_patient("Ana", "600000001", "a@x.com")
		with self.assertRaises(Conflict):
			self.patient_ops.add_patient("Bea", "600000001", "b@x.com")
		self.assertEqual(self.patients.count_documents({}), 1)

	def test_same_email_conflicts(self):
		self.patient_ops.add_patient("Ana", "600000001", "a@x.com")
		with self.assertRaises(Conflict) as ctx:
			self.patient_ops.add_patient("Bea", "600000002", "a@x.com")
		self.assertEqual(ctx.exception.message, "patient already exists")

	def test_blank_field_rejected(self):
		with self.assertRaises(InvalidArgument):
			self.patient_ops.add_patient("", "600000001", "a@x.com")
		self.assertEqual(self.patients.count_documents({}), 0)

	def test_unique_index_catches_missed_duplicate(self):
		"""A concurrent writer that got past the pre-check still ends in Conflict."""
		self.patient_ops.add_patient("Ana", "600000001", "a@x.com")
		never_matches = {"$or": [{"_id": None}]}
		with mock.patch("booking.core.patients.contact_filter", return_value=never_matches):
			with self.assertRaises(Conflict):
				self.patient_ops.add_patient("Ana again", "600000001", "other@x.com")
		self.assertEqual(self.patients.count_documents({}), 1)


class TestGetPatient(MongoTestCase):

	def test_fetch_existing(self):
		created = self.patient_ops.add_patient("Ana", "600000001", "a@x.com")
		self.assertEqual(self.patient_ops.get_patient(created.id), created)

	def test_unknown_id(self):
		with self.assertRaises(NotFound):
			self.patient_ops.get_patient(str(ObjectId()))

	def test_malformed_id(self):
		with self.assertRaises(InvalidArgument):
			self.patient_ops.get_patient("P1")


class TestUpdatePatient(MongoTestCase):

	def setUp(self):
		super().setUp()
		self.ana = self.patient_ops.add_patient("Ana", "600000001", "a@x.com")

	def test_name_only_keeps_contact_fields(self):
		updated = self.patient_ops.update_patient(self.ana.id, PatientUpdate(name="Ana Maria"))

		self.assertEqual(updated.name, "Ana Maria")
		self.assertEqual(updated.phone, "600000001")
		self.assertEqual(updated.email, "a@x.com")
		self.assertEqual(updated.id, self.ana.id)

	def test_valid_phone_applied(self):
		updated = self.patient_ops.update_patient(self.ana.id, PatientUpdate(phone="+34 600 123 456"))
		self.assertEqual(updated.phone, "+34 600 123 456")

	def test_invalid_phone_leaves_patient_unchanged(self):
		with self.assertRaises(InvalidArgument) as ctx:
			self.patient_ops.update_patient(self.ana.id, PatientUpdate(name="Zed", phone="555-1"))
		self.assertEqual(ctx.exception.message, "invalid phone")
		self.assertEqual(self.patient_ops.get_patient(self.ana.id), self.ana)

	def test_phone_checked_even_when_unchanged(self):
		ops = PatientOperations(self.patients, phone_validator=lambda phone: False)
		with self.assertRaises(InvalidArgument):
			ops.update_patient(self.ana.id, PatientUpdate(phone=self.ana.phone))

	def test_validator_skipped_without_phone(self):
		validator = mock.Mock(return_value=False)
		ops = PatientOperations(self.patients, phone_validator=validator)
		ops.update_patient(self.ana.id, PatientUpdate(email="new@x.com"))
		validator.assert_not_called()

	def test_empty_update_returns_stored_patient(self):
		self.assertEqual(self.patient_ops.update_patient(self.ana.id, PatientUpdate()), self.ana)

	def test_unknown_patient(self):
		with self.assertRaises(NotFound):
			self.patient_ops.update_patient(str(ObjectId()), PatientUpdate(name="Nobody"))

	def test_malformed_id(self):
		with self.assertRaises(InvalidArgument):
			self.patient_ops.update_patient("P1", PatientUpdate(name="Nobody"))

	def test_collision_with_other_patient(self):
		self.patient_ops.add_patient("Bea", "600000002", "b@x.com")
		with self.assertRaises(Conflict):
			self.patient_ops.update_patient(self.ana.id, PatientUpdate(email="b@x.com"))
		self.assertEqual(self.patient_ops.get_patient(self.ana.id).email, "a@x.com")

	def test_own_values_are_not_a_collision(self):
		updated = self.patient_ops.update_patient(
			self.ana.id,
			PatientUpdate(phone="600000001", email="a@x.com")
		)
		self.assertEqual(updated, self.ana)

	def test_blank_email_rejected(self):
		with self.assertRaises(InvalidArgument) as ctx:
			self.patient_ops.update_patient(self.ana.id, PatientUpdate(email=""))
		self.assertEqual(ctx.exception.message, "email is required")
		self.assertEqual(self.patient_ops.get_patient(self.ana.id).email, "a@x.com")

	def test_blank_name_rejected(self):
		with self.assertRaises(InvalidArgument):
			self.patient_ops.update_patient(self.ana.id, PatientUpdate(name="  "))
		self.assertEqual(self.patient_ops.get_patient(self.ana.id).name, "Ana")

	def test_unknown_patient_reported_before_phone_check(self):
		with self.assertRaises(NotFound):
			self.patient_ops.update_patient(str(ObjectId()), PatientUpdate(phone="555-1"))

	def test_unique_index_catches_missed_collision(self):
		"""A concurrent writer that got past the collision check still ends in Conflict."""
		self.patient_ops.add_patient("Bea", "600000002", "b@x.com")
		never_matches = {"$or": [{"_id": None}]}
		with mock.patch("booking.core.patients.contact_filter", return_value=never_matches):
			with self.assertRaises(Conflict):
				self.patient_ops.update_patient(self.ana.id, PatientUpdate(email="b@x.com"))
		self.assertEqual(self.patient_ops.get_patient(self.ana.id).email, "a@x.com")

	def test_vanished_during_update(self):
		with mock.patch.object(self.patients, "find_one_and_update", return_value=None):
			with self.assertRaises(NotFound):
				self.patient_ops.update_patient(self.ana.id, PatientUpdate(name="Gone"))
