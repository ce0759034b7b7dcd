# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the request schemas to ensure:
# - Valid data is accepted and parsed correctly
# - Invalid data raises ValidationError
# - Missing fields default to None so the service layer can report them
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import (
    AppointmentPayload,
    ChangePasswordRequest,
    ClientPayload,
    LoginRequest,
    ServiceCategory,
    ServicePayload,
    UserIdentity,
)


class TestClientPayload:
    """Tests for ClientPayload model."""

    def test_all_fields_optional(self):
        """An empty body parses; required-ness is checked by the service."""
        payload = ClientPayload()

        assert payload.nome is None
        assert payload.aniversario is None

    def test_full_payload(self):
        payload = ClientPayload(
            nome="Ana Souza",
            telefone="(11) 98888-7777",
            aniversario="1990-03-15",
        )

        assert payload.nome == "Ana Souza"
        assert payload.aniversario == "1990-03-15"


class TestServicePayload:
    """Tests for ServicePayload model."""

    def test_numeric_strings_are_parsed(self):
        # Arrange: the front-end sends form values as strings
        data = {"nome": "Escova", "preco": "49.90", "duracao_minutos": "45", "categoria": "cabelo"}

        # Act
        payload = ServicePayload(**data)

        # Assert
        assert payload.preco == pytest.approx(49.9)
        assert payload.duracao_minutos == 45

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError):
            ServicePayload(nome="Escova", preco=-0.01)

    def test_zero_duration_rejected(self):
        with pytest.raises(ValidationError):
            ServicePayload(nome="Escova", duracao_minutos=0)

    def test_category_is_not_checked_here(self):
        """Unknown categories pass the schema and are rejected by CatalogService."""
        assert ServicePayload(categoria="barba").categoria == "barba"


class TestServiceCategory:
    """Tests for ServiceCategory enum."""

    def test_values(self):
        assert ServiceCategory.values() == ["cabelo", "unhas", "estetica"]

    def test_is_string_enum(self):
        assert ServiceCategory("unhas") == "unhas"


class TestAppointmentPayload:
    """Tests for AppointmentPayload model."""

    def test_cliente_id_kept_as_sent(self):
        assert AppointmentPayload(cliente_id="12").cliente_id == "12"
        assert AppointmentPayload(cliente_id=12).cliente_id == 12

    def test_defaults(self):
        payload = AppointmentPayload()

        assert payload.pago is False
        assert payload.observacoes is None


class TestUserModels:
    """Tests for the admin account schemas."""

    def test_login_fields_optional(self):
        assert LoginRequest().usuario is None

    def test_change_password_fields(self):
        request = ChangePasswordRequest(usuario="admin", senha_atual="a", senha_nova="b")

        assert request.senha_nova == "b"

    def test_identity_has_no_password(self):
        identity = UserIdentity(id=1, usuario="admin")

        assert identity.model_dump() == {"id": 1, "usuario": "admin"}
