# main.py

import time
from contextlib import asynccontextmanager

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pymongo.database import Database

from booking import __version__
from booking.api.routes import appointments as appointments_route
from booking.api.routes import patients as patients_route
from booking.api.routes import system as system_route
from booking.config.settings import get_settings
from booking.core.appointments import AppointmentOperations
from booking.core.errors import BookingError
from booking.core.patients import PatientOperations
from booking.data.connection import close_connection, get_database
from booking.data.repositories import appointment as appointment_repo
from booking.data.repositories import patient as patient_repo
from booking.utils.logger import logger, setup_logging

load_dotenv()
settings = get_settings()

# Needs to be called before any logs are sent
setup_logging(settings.LOG_LEVEL)


def startup_event(app: FastAPI, database: Database):
	"""Wires collections into the operation components and ensures indexes."""
	logger(tag="startup").info(f"Starting {settings.APP_NAME} on database '{database.name}'...")

	patients = database.get_collection(settings.PATIENTS_COLLECTION)
	appointments = database.get_collection(settings.APPOINTMENTS_COLLECTION)
	patient_repo.create_indexes(patients)
	appointment_repo.create_indexes(appointments)

	app.state.database = database
	app.state.patient_operations = PatientOperations(patients)
	app.state.appointment_operations = AppointmentOperations(appointments, patients)

	logger(tag="startup").info(f"{settings.APP_NAME} startup complete")

def shutdown_event(owns_connection: bool):
	"""Cleanup on shutdown"""
	logger(tag="shutdown").info(f"Shutting down {settings.APP_NAME}...")
	if owns_connection:
		close_connection()

def create_app(database: Database | None = None) -> FastAPI:
	"""
	Builds the application.

	Pass `database` to run against an existing handle (tests use an in-memory
	one); otherwise the shared client from `booking.data.connection` is used
	and closed again on shutdown.
	"""

	@asynccontextmanager
	async def lifespan(app: FastAPI):
		startup_event(app, database if database is not None else get_database())
		yield
		shutdown_event(owns_connection=database is None)

	app = FastAPI(
		lifespan=lifespan,
		title=settings.APP_NAME,
		description="Patient registry and appointment booking backed by MongoDB",
		version=__version__
	)

	app.add_middleware(
		CORSMiddleware,
		allow_origins=settings.CORS_ORIGINS,
		allow_credentials=True,
		allow_methods=["*"],
		allow_headers=["*"],
	)

	@app.middleware("http")
	async def log_requests(request: Request, call_next):
		start_time = time.time()
		response = await call_next(request)
		process_time = time.time() - start_time
		response.headers["X-Process-Time"] = f"{process_time:.4f}"
		logger(tag="http").info(
			f"{request.method} {request.url.path} - Status: {response.status_code} - Time: {process_time:.4f}s"
		)
		return response

	@app.exception_handler(BookingError)
	async def booking_error_handler(request: Request, exc: BookingError):
		logger(tag="http").warning(f"{request.method} {request.url.path} - {exc.kind}: {exc.message}")
		return JSONResponse(
			status_code=exc.status_code,
			content={"error": exc.kind, "detail": exc.message}
		)

	app.include_router(patients_route.router)
	app.include_router(appointments_route.router)
	app.include_router(system_route.router)

	@app.get("/api/info")
	async def get_api_info():
		"""Get API information, lists all paths available in the api."""
		return {
			"name": settings.APP_NAME,
			"version": __version__,
			"endpoints": list(app.openapi()["paths"])
		}

	return app

app = create_app()
