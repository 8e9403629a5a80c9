# api/routes/patients.py

from fastapi import APIRouter, Depends

from booking.api.deps import get_patient_operations
from booking.core.patients import PatientOperations
from booking.models.patient import (Patient, PatientCreateRequest,
                                    PatientUpdate)
from booking.utils.logger import logger

router = APIRouter(prefix="/patients", tags=["Patients"])

@router.get("/{patient_id}", response_model=Patient)
def get_patient(
	patient_id: str,
	ops: PatientOperations = Depends(get_patient_operations)
):
	logger().info(f"GET /patients/{patient_id}")
	return ops.get_patient(patient_id)

@router.post("", response_model=Patient)
def add_patient(
	req: PatientCreateRequest,
	ops: PatientOperations = Depends(get_patient_operations)
):
	patient = ops.add_patient(req.name, req.phone, req.email)
	logger().info(f"POST /patients created id={patient.id}")
	return patient

@router.patch("/{patient_id}", response_model=Patient)
def update_patient(
	patient_id: str,
	req: PatientUpdate,
	ops: PatientOperations = Depends(get_patient_operations)
):
	logger().info(f"PATCH /patients/{patient_id} fields={list(req.to_set())}")
	return ops.update_patient(patient_id, req)
