"""Health utility used by the API health-check."""

import time
from datetime import datetime, timezone

from sr_calculator.schemas.health import HealthResponse


def get_health_status(service: str, version: str, started_at: float) -> HealthResponse:
    """Report liveness plus whole seconds elapsed since ``started_at`` (a monotonic timestamp)."""
    return HealthResponse(
        status="ok",
        service=service,
        timestamp=datetime.now(timezone.utc).isoformat(),
        version=version,
        uptime=max(0, int(time.monotonic() - started_at)),
    )
