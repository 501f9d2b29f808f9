"""
Module: common.py
Description: Shared guard for CI hook adapters.

Hooks run inside the host's build and event threads. Whatever goes
wrong while resolving credentials or delivering, the hook logs one
warning and hands back a failed DeliveryResult. Outcomes are counted
in the metrics registry.
"""

from typing import Callable, Optional

from coralogix_ci.models.result import DeliveryResult
from coralogix_ci.utils.logger import get_logger
from coralogix_ci.utils.metrics import get_registry

logger = get_logger(__name__)

DELIVERIES_SUCCEEDED = "coralogix.deliveries.succeeded"
DELIVERIES_FAILED = "coralogix.deliveries.failed"


def run_guarded(action: Callable[[], Optional[int]], failure_message: str, **context) -> DeliveryResult:
    """
    Run a delivery action and convert any failure into a DeliveryResult.

    Args:
        action: Zero-argument callable performing the delivery, returning
            the HTTP status code when it has one
        failure_message: Warning logged when the action fails
        **context: Extra structured fields for the warning

    Returns:
        DeliveryResult.ok(status_code) or DeliveryResult.failed(error)
    """
    try:
        status_code = action()
    except Exception as e:
        # Delivery failures must not reach the host's job or event thread
        logger.warning(
            failure_message,
            error=str(e),
            error_type=type(e).__name__,
            **context
        )
        get_registry().increment(DELIVERIES_FAILED)
        return DeliveryResult.failed(e)
    get_registry().increment(DELIVERIES_SUCCEEDED)
    return DeliveryResult.ok(status_code)
