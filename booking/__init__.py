"""
Appointment booking service.

Patients and their appointments stored in MongoDB, exposed over a small
FastAPI surface.
"""

__version__ = "1.0.0"
