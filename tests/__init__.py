# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the Salon API:
# - conftest.py: in-memory store standing in for the Supabase tables
# - test_supabase_client.py: query building, error codes and retries
# - test_clients.py, test_catalog.py, test_appointments.py: CRUD endpoints
# - test_dashboard.py: daily aggregates
# - test_auth.py: login and admin account
#
# Run tests with: pytest
# =============================================================================
