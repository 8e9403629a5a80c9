# api/routes/appointments.py

from fastapi import APIRouter, Depends

from booking.api.deps import get_appointment_operations
from booking.core.appointments import AppointmentOperations
from booking.models.appointment import (Appointment,
                                        AppointmentCreateRequest,
                                        DeleteResult)
from booking.utils.logger import logger

router = APIRouter(prefix="/appointments", tags=["Appointments"])

@router.get("", response_model=list[Appointment])
def get_appointments(ops: AppointmentOperations = Depends(get_appointment_operations)):
	appointments = ops.get_appointments()
	logger().info(f"GET /appointments returned {len(appointments)} appointments")
	return appointments

@router.post("", response_model=Appointment)
def add_appointment(
	req: AppointmentCreateRequest,
	ops: AppointmentOperations = Depends(get_appointment_operations)
):
	logger().info(f"POST /appointments patient={req.patient} date={req.date}")
	return ops.add_appointment(req.patient, req.date, req.type)

@router.delete("/{appointment_id}", response_model=DeleteResult)
def delete_appointment(
	appointment_id: str,
	ops: AppointmentOperations = Depends(get_appointment_operations)
):
	logger().info(f"DELETE /appointments/{appointment_id}")
	return DeleteResult(deleted=ops.delete_appointment(appointment_id))
