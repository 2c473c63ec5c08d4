"""
Job logging utilities for the kill leaderboard bot.
"""

import logging
import time

logger = logging.getLogger(__name__)


def get_job_latency_ms(start_time: float) -> float:
    """Calculate elapsed time in milliseconds since start_time."""
    return (time.time() - start_time) * 1000


def log_job_completion(
    job_name: str,
    start_time: float,
    success: bool = True,
    **kwargs
) -> None:
    """Log job completion status with latency and any extra counters."""
    status = "SUCCESS" if success else "FAILED"
    latency_ms = get_job_latency_ms(start_time)
    
    params = ", ".join([f"{k}={v}" for k, v in kwargs.items() if v is not None])
    params_str = f" | {params}" if params else ""
    
    logger.info(
        f"Job: {job_name} | Status: {status} | Latency: {latency_ms:.2f}ms{params_str}"
    )
