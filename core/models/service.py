# =============================================================================
# core/models/service.py - Salon Service Schemas
# =============================================================================
# The catalog of services the salon offers (cut, manicure, facial, ...).
# Appointments refer to a service by its name, not by id.
# =============================================================================

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class ServiceCategory(str, Enum):
    """
    Allowed service categories.

    - cabelo: hair
    - unhas: nails
    - estetica: aesthetics
    """
    CABELO = "cabelo"
    UNHAS = "unhas"
    ESTETICA = "estetica"

    @classmethod
    def values(cls) -> list[str]:
        return [category.value for category in cls]


class ServicePayload(BaseModel):
    """
    Schema for creating or updating a service.

    Example:
        {
            "nome": "Corte feminino",
            "descricao": "Corte com lavagem e finalização",
            "preco": 80.0,
            "duracao_minutos": 60,
            "categoria": "cabelo",
            "popular": true
        }
    """

    nome: str | None = Field(default=None, description="Service name (unique by convention)")

    descricao: str | None = Field(default=None, description="Short description")

    preco: float | None = Field(
        default=None,
        ge=0,
        description="Price in BRL"
    )

    duracao_minutos: int | None = Field(
        default=None,
        gt=0,
        description="Duration in minutes"
    )

    # Validated against ServiceCategory in the service layer so the error
    # message can list the allowed values
    categoria: str | None = Field(default=None, description="One of: cabelo, unhas, estetica")

    popular: Any = Field(default=False, description="Highlight flag (coerced to bool)")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "nome": "Corte feminino",
                    "descricao": "Corte com lavagem e finalização",
                    "preco": 80.0,
                    "duracao_minutos": 60,
                    "categoria": "cabelo",
                    "popular": True,
                },
            ]
        }
    }
