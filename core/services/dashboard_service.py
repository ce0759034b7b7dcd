# =============================================================================
# core/services/dashboard_service.py - Dashboard Aggregates
# =============================================================================
# Read-only numbers for the salon's home screen. Each aggregate pulls a
# filtered row set and does the grouping/summing here rather than in the
# store, which is fine at a single salon's data volume.
# =============================================================================

import logging
from collections import Counter
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP
from typing import Any

from core.services.common import store_failure
from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.utils import parse_date, today

logger = logging.getLogger(__name__)

APPOINTMENTS = "agendamentos"
CLIENTS = "clientes"
SERVICES = "servicos"

POPULAR_LIMIT = 5
CENTS = Decimal("0.01")


def _to_decimal(value: Any) -> Decimal:
    """Price as Decimal; missing or malformed prices count as zero."""
    if value is None:
        return Decimal("0")
    try:
        return Decimal(str(value))
    except InvalidOperation:
        logger.warning(f"Ignoring malformed price: {value!r}")
        return Decimal("0")


class DashboardService:
    """Aggregates shown on the dashboard. All methods are side-effect free."""

    @staticmethod
    def appointments_today() -> list[dict[str, Any]]:
        """Today's agenda: time, client, service, paid flag and id, ordered by time."""
        try:
            return SupabaseClient.fetch_rows(
                APPOINTMENTS,
                columns="horario, cliente_nome, servico, pago, id",
                filters=[("eq", "data", today().isoformat())],
                order_by=["horario"],
            )
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao carregar os agendamentos do dia") from e

    @staticmethod
    def total_appointments_today() -> int:
        """Number of appointments booked for today."""
        try:
            return SupabaseClient.count_rows(
                APPOINTMENTS,
                filters=[("eq", "data", today().isoformat())],
            )
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao carregar total de agendamentos de hoje") from e

    @staticmethod
    def total_clients() -> int:
        """Number of registered clients."""
        try:
            return SupabaseClient.count_rows(CLIENTS)
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao carregar o total de clientes") from e

    @staticmethod
    def popular_services() -> list[dict[str, Any]]:
        """
        Top 5 services by number of appointments.

        Ties keep the order in which the services were first seen.

        Returns:
            [{"servico": "Corte feminino", "total": 12}, ...]
        """
        try:
            rows = SupabaseClient.fetch_rows(APPOINTMENTS, columns="servico")
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao carregar os serviços populares") from e

        counts = Counter(row["servico"] for row in rows if row.get("servico"))
        return [
            {"servico": servico, "total": total}
            for servico, total in counts.most_common(POPULAR_LIMIT)
        ]

    @staticmethod
    def revenue_today() -> dict[str, Any]:
        """
        Sum of prices of today's paid appointments.

        Prices are looked up by service name. An appointment whose service
        name isn't in the catalog contributes zero.

        Returns:
            {"faturamento": "150.00", "total_servicos": 2}
        """
        try:
            paid = SupabaseClient.fetch_rows(
                APPOINTMENTS,
                columns="servico",
                filters=[("eq", "data", today().isoformat()), ("eq", "pago", True)],
            )
            services = SupabaseClient.fetch_rows(SERVICES, columns="nome, preco")
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao calcular faturamento") from e

        prices = {service["nome"]: _to_decimal(service.get("preco")) for service in services}
        total = sum(
            (prices.get(row.get("servico"), Decimal("0")) for row in paid),
            Decimal("0"),
        )

        return {
            "faturamento": str(total.quantize(CENTS, rounding=ROUND_HALF_UP)),
            "total_servicos": len(paid),
        }

    @staticmethod
    def birthdays_today() -> dict[str, Any]:
        """
        Clients whose birthday (day and month, any year) is today.

        Returns:
            {"total": 1, "clientes": [{"nome": ..., "telefone": ..., ...}]}
        """
        try:
            rows = SupabaseClient.fetch_rows(
                CLIENTS,
                columns="nome, telefone, email, aniversario",
                filters=[("not_null", "aniversario", None)],
            )
        except SupabaseClientError as e:
            raise store_failure(e, "Erro ao buscar aniversariantes") from e

        current = today()
        clients = []
        for row in rows:
            birthday = parse_date(row.get("aniversario"))
            if birthday and (birthday.day, birthday.month) == (current.day, current.month):
                clients.append(row)

        return {"total": len(clients), "clientes": clients}
