import logging
from typing import Any, Dict, Iterable, Protocol

from digilima.frontend.elements import Element

logger = logging.getLogger(__name__)


class Telemetry(Protocol):
    """Analytics sink; the page works the same with or without one"""

    def track(self, event: str, params: Dict[str, Any]) -> None:
        ...


class NullTelemetry:
    def track(self, event: str, params: Dict[str, Any]) -> None:
        return None


class LoggingTelemetry:
    """Writes analytics events to the application log"""

    def track(self, event: str, params: Dict[str, Any]) -> None:
        logger.info(f"analytics event {event}: {params}")


def track_cta_clicks(buttons: Iterable[Element], telemetry: Telemetry) -> None:
    """Report ``cta_click`` with the trimmed label whenever a call-to-action is clicked"""
    for button in buttons:
        button.add_event_listener(
            "click",
            lambda clicked: telemetry.track("cta_click", {"button_text": clicked.text.strip()}),
        )
