# =============================================================================
# core/services/appointment_service.py - Appointment Business Logic
# =============================================================================
# Handles the salon agenda.
#
# Slot conflicts: an appointment occupies the (data, horario) pair and the
# `agendamentos` table has a unique constraint on it. Creates and updates are
# a single write; a unique violation from the store is the one and only
# conflict signal. There is no read-before-write, so two concurrent requests
# for the same slot can't both succeed.
# =============================================================================

import logging
from typing import Any

from app.exceptions import ConflictError, NotFoundError, ValidationError
from core.models.appointment import AppointmentPayload
from core.services.common import require_id, store_failure
from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import coerce_bool, is_blank, parse_date, parse_id, parse_time, today

logger = logging.getLogger(__name__)

TABLE = "agendamentos"
LIST_COLUMNS = "*, clientes (nome, telefone)"

NOT_FOUND_MESSAGE = "Agendamento não encontrado"
SLOT_TAKEN_MESSAGE = "Já existe um agendamento neste horário"


class AppointmentService:
    """
    Service for appointment operations.

    Provides a clean interface between API routes and database.
    """

    @staticmethod
    def _build_row(payload: AppointmentPayload) -> dict[str, Any]:
        """
        Validate an appointment body and build the row to store.

        The time is normalized to "HH:MM", so "10:00" and "10:00:00" are the
        same slot.

        Raises:
            ValidationError: If cliente_id is missing/non-numeric or the slot is incomplete or malformed
        """
        cliente_id = parse_id(payload.cliente_id)
        if cliente_id is None:
            raise ValidationError("cliente_id é obrigatório")

        if is_blank(payload.data) or is_blank(payload.horario):
            raise ValidationError("Data e horário são obrigatórios")

        data = parse_date(payload.data)
        if data is None:
            raise ValidationError(
                "Data inválida. Use o formato AAAA-MM-DD",
                details={"data": payload.data},
            )

        horario = parse_time(payload.horario)
        if horario is None:
            raise ValidationError(
                "Horário inválido. Use o formato HH:MM",
                details={"horario": payload.horario},
            )

        return {
            "cliente_id": cliente_id,
            "cliente_nome": payload.cliente_nome or "",
            "servico": payload.servico,
            "data": data.isoformat(),
            "horario": horario.strftime("%H:%M"),
            "observacoes": payload.observacoes or None,
            "pago": coerce_bool(payload.pago),
        }

    @staticmethod
    def _classify_write_error(e: SupabaseClientError, row: dict[str, Any], message: str) -> Exception:
        """Map a failed insert/update to the matching API exception."""
        if e.is_unique_violation:
            logger.info(f"Slot already taken: {row['data']} {row['horario']}")
            return ConflictError(
                SLOT_TAKEN_MESSAGE,
                details={"data": row["data"], "horario": row["horario"]},
            )
        if e.is_foreign_key_violation:
            return ValidationError(
                "Cliente não encontrado",
                details={"cliente_id": row["cliente_id"]},
            )
        return store_failure(e, message)

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------

    @staticmethod
    def list_appointments() -> list[dict[str, Any]]:
        """List every appointment by date and time, with the client's name and phone."""
        try:
            return SupabaseClient.fetch_rows(
                TABLE,
                columns=LIST_COLUMNS,
                order_by=["data", "horario"],
            )
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao buscar agendamentos") from e

    @staticmethod
    def list_by_date(day: str) -> list[dict[str, Any]]:
        """
        List the appointments of one day ordered by time.

        Raises:
            ValidationError: If the date is malformed
        """
        parsed = parse_date(day)
        if parsed is None:
            raise ValidationError("Data inválida. Use o formato AAAA-MM-DD", details={"data": day})

        try:
            return SupabaseClient.fetch_rows(
                TABLE,
                filters=[("eq", "data", parsed.isoformat())],
                order_by=["horario"],
            )
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao buscar agendamentos") from e

    @staticmethod
    def list_today() -> list[dict[str, Any]]:
        """List today's appointments ordered by time."""
        return AppointmentService.list_by_date(today().isoformat())

    @staticmethod
    def get_appointment(appointment_id: Any) -> dict[str, Any]:
        """
        Get an appointment by id.

        Raises:
            NotFoundError: If no appointment has this id
        """
        row_id = require_id(appointment_id)

        try:
            appointment = SupabaseClient.fetch_one(
                TABLE,
                columns=LIST_COLUMNS,
                filters=[("eq", "id", row_id)],
            )
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao buscar agendamento") from e

        if not appointment:
            raise NotFoundError(NOT_FOUND_MESSAGE, details={"id": row_id})
        return appointment

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    @staticmethod
    def create_appointment(payload: AppointmentPayload) -> dict[str, Any]:
        """
        Book a slot.

        Returns:
            The stored row

        Raises:
            ValidationError: If the body is invalid
            ConflictError: If the (data, horario) slot is already taken
        """
        row = AppointmentService._build_row(payload)

        try:
            appointment = SupabaseClient.insert_row(TABLE, row)
        except SupabaseClientError as e:
            raise AppointmentService._classify_write_error(e, row, "Erro ao criar agendamento") from e

        logger.info(f"Created appointment: {appointment.get('id')} at {row['data']} {row['horario']}")
        return appointment

    @staticmethod
    def update_appointment(appointment_id: Any, payload: AppointmentPayload) -> dict[str, Any]:
        """
        Replace an appointment's fields, possibly moving it to another slot.

        Keeping the same slot is not a conflict: the unique constraint only
        fires when another row holds the target slot.

        Raises:
            ValidationError: If the id or body is invalid
            NotFoundError: If no appointment has this id
            ConflictError: If the target slot is held by another appointment
        """
        row_id = require_id(appointment_id)
        row = AppointmentService._build_row(payload)

        try:
            updated = SupabaseClient.update_rows(TABLE, row, filters=[("eq", "id", row_id)])
        except SupabaseClientError as e:
            raise AppointmentService._classify_write_error(e, row, "Erro ao atualizar agendamento") from e

        if not updated:
            raise NotFoundError(NOT_FOUND_MESSAGE, details={"id": row_id})

        logger.info(f"Updated appointment: {row_id}")
        return updated[0]

    @staticmethod
    def mark_paid(appointment_id: Any) -> dict[str, Any]:
        """
        Flag an appointment as paid.

        Raises:
            NotFoundError: If no appointment has this id
        """
        row_id = require_id(appointment_id)

        try:
            updated = SupabaseClient.update_rows(TABLE, {"pago": True}, filters=[("eq", "id", row_id)])
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao marcar como pago") from e

        if not updated:
            raise NotFoundError(NOT_FOUND_MESSAGE, details={"id": row_id})

        logger.info(f"Marked appointment as paid: {row_id}")
        return updated[0]

    @staticmethod
    def delete_appointment(appointment_id: Any) -> None:
        """
        Delete an appointment.

        Raises:
            NotFoundError: If no appointment has this id
        """
        row_id = require_id(appointment_id)

        try:
            deleted = SupabaseClient.delete_rows(TABLE, filters=[("eq", "id", row_id)])
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao excluir agendamento") from e

        if not deleted:
            raise NotFoundError(NOT_FOUND_MESSAGE, details={"id": row_id})

        logger.info(f"Deleted appointment: {row_id}")
