#!/usr/bin/env python3
# =============================================================================
# scripts/create_admin.py - Admin Account Setup
# =============================================================================
# Creates the admin account, or resets its password if it already exists.
#
# Usage:
#   python scripts/create_admin.py --usuario admin
#   # prompts for the password; or pass it through the environment:
#   ADMIN_PASSWORD=... python scripts/create_admin.py --usuario admin
#
# Prerequisites:
#   - SUPABASE_URL and SUPABASE_SERVICE_KEY set (.env file)
# =============================================================================

import argparse
import getpass
import logging
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from core.services.user_service import UserService
from lib.supabase_client import SupabaseClientError

logger = logging.getLogger("create_admin")


def main() -> int:
    """Create or reset the admin account. Returns the process exit code."""
    parser = argparse.ArgumentParser(description="Create or reset the salon admin account")
    parser.add_argument("--usuario", default="admin", help="Admin username (default: admin)")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s - %(message)s")

    senha = os.environ.get("ADMIN_PASSWORD") or getpass.getpass("Nova senha: ")
    if not senha:
        logger.error("Password must not be empty")
        return 1

    try:
        user, created = UserService.set_admin_password(args.usuario, senha)
    except SupabaseClientError as e:
        logger.error(f"Could not set admin password: {e}")
        return 1

    if created:
        logger.info(f"Admin '{user['usuario']}' created (id {user['id']})")
    else:
        logger.info(f"Password for admin '{user['usuario']}' updated")
    return 0


if __name__ == "__main__":
    sys.exit(main())
