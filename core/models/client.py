# =============================================================================
# core/models/client.py - Client Schemas
# =============================================================================
# Request body for creating/updating a salon client.
#
# Fields are optional at the schema level so that missing values reach the
# service layer and get the same 400 message as blank ones.
# =============================================================================

from pydantic import BaseModel, Field


class ClientPayload(BaseModel):
    """
    Schema for creating or updating a client (full-row update).

    Example:
        {
            "nome": "Ana Souza",
            "telefone": "(11) 98888-7777",
            "email": "ana@example.com",
            "aniversario": "1990-03-15",
            "observacoes": "Prefere horários pela manhã"
        }
    """

    nome: str | None = Field(
        default=None,
        description="Client name (required, non-blank)"
    )

    telefone: str | None = Field(default=None, description="Phone number")

    email: str | None = Field(default=None, description="E-mail address")

    # Stored as a date; the year is ignored by the birthday dashboard
    aniversario: str | None = Field(
        default=None,
        description="Birth date (YYYY-MM-DD)"
    )

    observacoes: str | None = Field(default=None, description="Free-form notes")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"nome": "Ana Souza", "telefone": "(11) 98888-7777"},
            ]
        }
    }
