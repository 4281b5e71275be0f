"""
Decode telemetry.

Never emits the ID or anything decoded from it: latency,
outcome and error kind only.
"""
import logging
from typing import Literal, Optional

from azure.monitor.opentelemetry import configure_azure_monitor
from opentelemetry.trace import get_current_span

from egyptid.config import load_settings

logger = logging.getLogger("egyptid.telemetry")

ERROR_KINDS = ("InvalidFormat", "InvalidCentury", "InvalidDate", "InvalidGovernorate")


def init_telemetry():
    """
    Initialize Azure Application Insights via OpenTelemetry.
    Disabled when no connection string is configured (local / tests).
    """
    connection_string = load_settings().appinsights_connection_string

    if not connection_string:
        logger.debug("Telemetry disabled: no connection string")
        return

    configure_azure_monitor(
        connection_string=connection_string
    )


def emit_decode_telemetry(
    decode_latency_ms: int,
    outcome: Literal["decoded", "rejected"],
    error_kind: Optional[str] = None,
):
    """
    The only custom event we emit. Attributes are locked:
    - decode_latency_ms: int
    - outcome: "decoded" | "rejected"
    - error_kind: one of ERROR_KINDS, only when rejected
    """
    assert isinstance(decode_latency_ms, int), "decode_latency_ms must be int"
    assert outcome in ("decoded", "rejected"), f"outcome must be 'decoded' or 'rejected', got {outcome}"
    if outcome == "rejected":
        assert error_kind in ERROR_KINDS, f"error_kind must be one of {ERROR_KINDS}, got {error_kind}"
    else:
        assert error_kind is None, "error_kind is only set for rejected decodes"

    span = get_current_span()
    if not span:
        return

    attributes = {
        "decode_latency_ms": decode_latency_ms,
        "outcome": outcome,
    }
    if error_kind:
        attributes["error_kind"] = error_kind

    span.add_event(name="egyptid.decode", attributes=attributes)


def emit_exception_telemetry(exception: Exception):
    """Class name only; str(e) could echo user input."""
    span = get_current_span()
    if not span:
        return

    span.add_event(
        name="egyptid.exception",
        attributes={"exception_type": type(exception).__name__},
    )
