"""
Banner usage events.

Disabled trackers only log events. Enabled trackers hand each event dict
to an injected sink (an HTTP client, a queue, a list in tests).
"""

import logging
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Optional

import settings

logger = logging.getLogger(__name__)


@dataclass
class AnalyticsEvent:
    action: str
    category: str
    label: Optional[str] = None
    value: Optional[float] = None
    properties: dict = field(default_factory=dict)


class Analytics:
    def __init__(self, enabled: Optional[bool] = None,
                 sink: Optional[Callable[[dict], Any]] = None):
        self.enabled = settings.ANALYTICS_ENABLED if enabled is None else enabled
        self.sink = sink

    def track(self, event: AnalyticsEvent) -> None:
        payload = asdict(event)
        if not self.enabled or self.sink is None:
            logger.debug(f"Analytics (dev): {payload}")
            return

        try:
            self.sink(payload)
        except Exception as e:
            logger.error(f"Analytics error: {e}")

    # Banner generation

    def banner_generation_started(self, lob: str, theme: str, language: str) -> None:
        self.track(AnalyticsEvent(
            action='banner_generation_started',
            category='banner',
            properties={'lob': lob, 'theme': theme, 'language': language},
        ))

    def banner_generation_completed(self, lob: str, banner_count: int, duration: float) -> None:
        self.track(AnalyticsEvent(
            action='banner_generation_completed',
            category='banner',
            value=duration,
            properties={'lob': lob, 'banner_count': banner_count},
        ))

    def banner_downloaded(self, banner_type: str, lob: str) -> None:
        self.track(AnalyticsEvent(
            action='banner_downloaded',
            category='banner',
            label=banner_type,
            properties={'lob': lob},
        ))

    def banner_remixed(self, banner_type: str) -> None:
        self.track(AnalyticsEvent(action='banner_remixed', category='banner', label=banner_type))

    # Colour selection

    def color_set_generated(self, source: str, gradient_name: str) -> None:
        """`source` is 'generator', 'remix' or 'variation'."""
        self.track(AnalyticsEvent(
            action='color_set_generated',
            category='style',
            label=source,
            properties={'gradient': gradient_name},
        ))

    # Errors

    def error(self, error_type: str, message: str, context: Optional[dict] = None) -> None:
        self.track(AnalyticsEvent(
            action='error',
            category='error',
            label=error_type,
            properties={'message': message, **(context or {})},
        ))
