"""Scheduled maintenance jobs.

Entry points run outside the request cycle (cron, Kubernetes CronJob).

Usage:
    psicozen-maintenance --retention-years 2
"""

from src.infrastructure.jobs.cleanup import main, run_cleanup

__all__ = ["main", "run_cleanup"]
