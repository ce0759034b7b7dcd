# =============================================================================
# core/models/appointment.py - Appointment Schemas
# =============================================================================
# An appointment occupies one slot: a (data, horario) pair. The store carries
# a unique constraint on that pair, which is what rejects double bookings.
# =============================================================================

from typing import Any

from pydantic import BaseModel, Field


class AppointmentPayload(BaseModel):
    """
    Schema for creating or updating an appointment.

    `cliente_id` may arrive as a number or a numeric string; the service
    layer rejects anything else with 400.

    Example:
        {
            "cliente_id": 12,
            "cliente_nome": "Ana Souza",
            "servico": "Corte feminino",
            "data": "2024-01-10",
            "horario": "10:00",
            "observacoes": null,
            "pago": false
        }
    """

    cliente_id: Any = Field(default=None, description="Client id (required, numeric)")

    # Denormalized for display in the agenda
    cliente_nome: str | None = Field(default=None, description="Client name")

    # Matched by name against servicos.nome
    servico: str | None = Field(default=None, description="Service name")

    data: str | None = Field(default=None, description="Date (YYYY-MM-DD)")

    horario: str | None = Field(default=None, description="Time (HH:MM)")

    observacoes: str | None = Field(default=None, description="Notes")

    pago: Any = Field(default=False, description="Paid flag (coerced to bool)")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "cliente_id": 12,
                    "cliente_nome": "Ana Souza",
                    "servico": "Corte feminino",
                    "data": "2024-01-10",
                    "horario": "10:00",
                },
            ]
        }
    }
