# core/__init__.py
"""
Business operations for patients and appointments.

	patients.PatientOperations: create, fetch and partially update patients
	appointments.AppointmentOperations: book, list and cancel appointments
"""
