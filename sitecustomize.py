"""Project-wide logging setup.

Python auto-imports sitecustomize when it is on sys.path. This ensures
all scripts/tests log to text/log_file.log unless CRIB_LOG_FILE is set.
"""
from __future__ import annotations

from crib_engine.log_setup import configure_logging

configure_logging()
