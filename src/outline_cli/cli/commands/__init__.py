"""
Command handlers for the outline CLI.
"""

from .auth import run_whoami
from .documents import run_list, run_save


__all__ = ["run_list", "run_save", "run_whoami"]
