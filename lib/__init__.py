# =============================================================================
# lib/ - Standalone Utility Modules
# =============================================================================
# This package contains reusable utilities:
# - supabase_client.py: Typed Supabase wrapper for table operations
# - security.py: Password hashing (bcrypt via passlib)
# - utils.py: Shared utilities (id parsing, flag coercion, dates)
# =============================================================================

from lib.supabase_client import SupabaseClient, SupabaseClientError
from lib.security import hash_password, verify_password
from lib.utils import coerce_bool, is_blank, parse_date, parse_id, parse_time, today

__all__ = [
    # Supabase
    "SupabaseClient",
    "SupabaseClientError",
    # Security
    "hash_password",
    "verify_password",
    # Utils
    "coerce_bool",
    "is_blank",
    "parse_date",
    "parse_id",
    "parse_time",
    "today",
]
