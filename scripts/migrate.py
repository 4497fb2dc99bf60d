#!/usr/bin/env python3
"""Create tables and reconcile reference data.  Idempotent, safe to run repeatedly."""

import sys
from pathlib import Path

# Allow running as a standalone script from the repo root
sys.path.insert(0, str(Path(__file__).parent.parent))

from easystock.catalog import prepare_store
from easystock.config import get_config
from easystock.storage.db import init_db
from easystock.utils.logging import configure_logging

if __name__ == "__main__":
    config = get_config()
    configure_logging(config.log_level, config.log_format)
    conn = init_db(config.db_path)
    try:
        results = prepare_store(conn)
    finally:
        conn.close()
    failed = [r.step for r in results if not r.ok]
    if failed:
        print(f"Reconciliation finished with failed steps: {', '.join(failed)}")
    print(f"Database ready at: {config.db_path}")
