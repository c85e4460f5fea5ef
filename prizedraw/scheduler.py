"""Background sweep of inactive tenant sessions."""

from __future__ import annotations

import atexit
import logging

from apscheduler.schedulers.background import BackgroundScheduler
from flask import Flask

from prizedraw.services.lottery_service import LotteryService

logger = logging.getLogger(__name__)

SWEEP_JOB_ID = "sweep-inactive-sessions"


def sweep_sessions(service: LotteryService) -> list[str]:
    removed = service.sweep_inactive()
    logger.info("Performed cleanup of inactive sessions (%d removed)", len(removed))
    return removed


def shutdown_scheduler(scheduler: BackgroundScheduler) -> None:
    if scheduler.running:
        scheduler.shutdown(wait=False)


def init_scheduler(app: Flask, service: LotteryService) -> BackgroundScheduler | None:
    """Start the periodic sweep unless disabled by ``SWEEP_ENABLED``."""

    if not app.config.get("SWEEP_ENABLED", True):
        return None

    interval = float(app.config["SWEEP_INTERVAL_SECONDS"])
    scheduler = BackgroundScheduler(daemon=True)
    scheduler.add_job(
        sweep_sessions,
        "interval",
        seconds=interval,
        args=[service],
        id=SWEEP_JOB_ID,
        max_instances=1,
        coalesce=True,
    )
    scheduler.start()
    atexit.register(shutdown_scheduler, scheduler)

    app.extensions["scheduler"] = scheduler
    logger.info("Session sweep scheduled every %.0f seconds", interval)
    return scheduler
