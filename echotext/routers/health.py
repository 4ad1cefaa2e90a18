# echotext/routers/health.py
# Health check endpoints for monitoring and load balancers

import logging
import time
from typing import Any, Dict

from fastapi import APIRouter, Response, status
from pydantic import BaseModel

from echotext.codec.compact import encode_compact
from echotext.codec.dispatcher import resolve_shared_config
from echotext.models.effects import Effect
from echotext.models.share_config import ShareConfig

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

VERSION = "1.0.0"

_PROBE = ShareConfig(text="health", effect=Effect.WAVE, color="#336699", is_bold=True, repeat=3)


class HealthStatus(BaseModel):
    """Health check response model."""
    status: str  # "healthy", "unhealthy"
    timestamp: float
    version: str = VERSION
    checks: Dict[str, Dict[str, Any]] = {}


class ComponentHealth(BaseModel):
    """Individual component health."""
    status: str
    latency_ms: float = 0.0
    message: str = ""


def check_codec_health() -> ComponentHealth:
    """Round-trip a probe config through the compact codec and dispatcher."""
    start = time.time()
    try:
        token = encode_compact(_PROBE)
        decoded = resolve_shared_config(token)
        latency_ms = (time.time() - start) * 1000
        if not isinstance(decoded, ShareConfig) or decoded.text != _PROBE.text:
            return ComponentHealth(
                status="unhealthy",
                latency_ms=latency_ms,
                message="Probe config did not survive a round trip"
            )
        return ComponentHealth(
            status="healthy",
            latency_ms=latency_ms,
            message=f"Probe token length {len(token)}"
        )
    except Exception as e:
        logger.error(f"Codec health check failed: {e}")
        return ComponentHealth(
            status="unhealthy",
            latency_ms=(time.time() - start) * 1000,
            message=f"Codec error: {type(e).__name__}"
        )


@router.get("/health", response_model=HealthStatus)
def health_check(response: Response):
    """
    Full health check endpoint.
    Returns status of all components.
    """
    codec_health = check_codec_health()
    checks = {
        "codec": {
            "status": codec_health.status,
            "latency_ms": round(codec_health.latency_ms, 2),
            "message": codec_health.message,
        }
    }

    overall_status = "healthy"
    response.status_code = status.HTTP_200_OK
    if codec_health.status != "healthy":
        overall_status = "unhealthy"
        response.status_code = status.HTTP_503_SERVICE_UNAVAILABLE

    return HealthStatus(status=overall_status, timestamp=time.time(), checks=checks)


@router.get("/health/live")
def liveness_probe():
    """Returns 200 if the application is running."""
    return {"status": "alive"}
