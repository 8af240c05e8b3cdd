"""
Per-banner colour state for the rendering layer.

The first render of a banner runs the full generator; the remix button
takes a fast table entry; a variation only swaps the CTA colour. Each
banner's current set lives in the injected cache until replaced.
"""

import logging
from typing import Callable, Hashable, Optional, Sequence

from analytics import Analytics
from color_set import ColorSet
from fast_remix import fast_remix_color_set
from gradients import Gradient
from selection import create_variation, generate_optimal_color_set
from ttl_cache import TTLCache

logger = logging.getLogger(__name__)


class BannerStyler:
    def __init__(self, cache: Optional[TTLCache] = None,
                 analytics: Optional[Analytics] = None,
                 rng: Optional[Callable[[], float]] = None,
                 max_attempts: Optional[int] = None,
                 catalog: Optional[Sequence[Gradient]] = None):
        self.cache = cache if cache is not None else TTLCache()
        self.analytics = analytics if analytics is not None else Analytics(enabled=False)
        self.rng = rng
        self.max_attempts = max_attempts
        self.catalog = catalog

    @staticmethod
    def _key(banner_id: Hashable) -> tuple:
        return ('color_set', banner_id)

    def current(self, banner_id: Hashable) -> Optional[ColorSet]:
        return self.cache.get(self._key(banner_id))

    def color_set_for(self, banner_id: Hashable) -> ColorSet:
        """Colour set for a banner's initial render, generated once and cached."""
        color_set = self.current(banner_id)
        if color_set is None:
            color_set = generate_optimal_color_set(self.max_attempts, self.catalog, self.rng)
            self._store(banner_id, color_set, 'generator')
        return color_set

    def remix(self, banner_id: Hashable, banner_type: str = 'standard') -> ColorSet:
        """Replace a banner's colours with a pre-validated table entry."""
        color_set = fast_remix_color_set(self.rng)
        self._store(banner_id, color_set, 'remix')
        self.analytics.banner_remixed(banner_type)
        return color_set

    def vary(self, banner_id: Hashable) -> ColorSet:
        """Swap only the CTA colour, keeping the background the user liked."""
        color_set = create_variation(self.color_set_for(banner_id))
        self._store(banner_id, color_set, 'variation')
        return color_set

    def forget(self, banner_id: Hashable) -> None:
        self.cache.delete(self._key(banner_id))

    def _store(self, banner_id: Hashable, color_set: ColorSet, source: str) -> None:
        self.cache.set(self._key(banner_id), color_set)
        self.analytics.color_set_generated(source, color_set.gradient.name)
        logger.debug(f"Banner {banner_id!r}: {source} -> {color_set.gradient.name}")
