# api/deps.py

from fastapi import Request

from booking.core.appointments import AppointmentOperations
from booking.core.patients import PatientOperations


def get_patient_operations(request: Request) -> PatientOperations:
	"""Patient operations built during startup."""
	return request.app.state.patient_operations

def get_appointment_operations(request: Request) -> AppointmentOperations:
	"""Appointment operations built during startup."""
	return request.app.state.appointment_operations
