# =============================================================================
# app/routers/dashboard.py - Dashboard Endpoints
# =============================================================================
# Read-only aggregates for the salon's home screen.
# =============================================================================

from fastapi import APIRouter

from core.services.dashboard_service import DashboardService

router = APIRouter()


@router.get("/agendamentos-hoje")
def appointments_today():
    """Today's agenda ordered by time."""
    return DashboardService.appointments_today()


@router.get("/total-agendamentos-hoje")
def total_appointments_today():
    """Count of today's appointments."""
    return {"total": DashboardService.total_appointments_today()}


@router.get("/total-clientes")
def total_clients():
    """Count of registered clients."""
    return {"total": DashboardService.total_clients()}


@router.get("/servicos-populares")
def popular_services():
    """Top 5 services by number of appointments."""
    return DashboardService.popular_services()


@router.get("/faturamento-hoje")
def revenue_today():
    """Revenue from today's paid appointments."""
    return DashboardService.revenue_today()


@router.get("/aniversariantes-hoje")
def birthdays_today():
    """Clients with a birthday today."""
    return DashboardService.birthdays_today()
