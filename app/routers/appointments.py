# =============================================================================
# app/routers/appointments.py - Appointment Endpoints
# =============================================================================
# Endpoints:
# - GET    /agendamentos              List appointments (by date, then time)
# - POST   /agendamentos              Book a slot (409 if taken)
# - GET    /agendamentos/hoje         Today's appointments
# - GET    /agendamentos/data/{data}  Appointments on a given day
# - GET    /agendamentos/{id}         Get one appointment
# - PUT    /agendamentos/{id}         Replace an appointment (409 if slot taken)
# - PUT    /agendamentos/{id}/pagar   Mark as paid
# - DELETE /agendamentos/{id}         Delete an appointment
# =============================================================================

from typing import Annotated

from fastapi import APIRouter, Path

from core.models.appointment import AppointmentPayload
from core.services.appointment_service import AppointmentService

router = APIRouter()


@router.get("")
def list_appointments():
    """List all appointments with the client's name and phone embedded."""
    return AppointmentService.list_appointments()


@router.post("", status_code=201)
def create_appointment(payload: AppointmentPayload):
    """
    Book an appointment.

    Returns 409 when another appointment holds the same date and time.
    """
    appointment = AppointmentService.create_appointment(payload)
    return {
        "message": "Agendamento criado com sucesso!",
        "id": appointment.get("id"),
        "agendamento": appointment,
    }


# Literal paths first so they are never read as an id
@router.get("/hoje")
def list_today():
    """List today's appointments ordered by time."""
    return AppointmentService.list_today()


@router.get("/data/{data}")
def list_by_date(
    data: Annotated[str, Path(description="Date (YYYY-MM-DD)")],
):
    """List the appointments of one day ordered by time."""
    return AppointmentService.list_by_date(data)


@router.get("/{appointment_id}")
def get_appointment(
    appointment_id: Annotated[str, Path(description="Appointment id")],
):
    """Get one appointment by id."""
    return AppointmentService.get_appointment(appointment_id)


@router.put("/{appointment_id}/pagar")
def mark_paid(
    appointment_id: Annotated[str, Path(description="Appointment id")],
):
    """Mark an appointment as paid."""
    appointment = AppointmentService.mark_paid(appointment_id)
    return {
        "message": "Agendamento marcado como pago",
        "agendamento": appointment,
    }


@router.put("/{appointment_id}")
def update_appointment(
    appointment_id: Annotated[str, Path(description="Appointment id")],
    payload: AppointmentPayload,
):
    """Replace an appointment's fields."""
    appointment = AppointmentService.update_appointment(appointment_id, payload)
    return {
        "message": "Agendamento atualizado com sucesso",
        "agendamento": appointment,
    }


@router.delete("/{appointment_id}")
def delete_appointment(
    appointment_id: Annotated[str, Path(description="Appointment id")],
):
    """Delete an appointment."""
    AppointmentService.delete_appointment(appointment_id)
    return {"message": "Agendamento excluído com sucesso"}
