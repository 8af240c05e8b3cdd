"""Tests for banner_styler: per-banner colour state."""

from analytics import Analytics
from banner_styler import BannerStyler
from color_set import validate_color_set
from fast_remix import FAST_REMIX_TABLE
from gradients import GRADIENTS
from ttl_cache import TTLCache


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def make_styler(events=None, clock=None):
    analytics = Analytics(enabled=True, sink=events.append) if events is not None else None
    return BannerStyler(
        cache=TTLCache(default_ttl=60, clock=clock or FakeClock()),
        analytics=analytics,
        rng=lambda: 0.0,
    )


class TestBannerStyler:
    def test_initial_render_is_generated_once(self):
        events = []
        styler = make_styler(events)

        first = styler.color_set_for('banner-1')
        second = styler.color_set_for('banner-1')

        assert first is second
        assert first.gradient is GRADIENTS[0]
        assert [e['label'] for e in events] == ['generator']

    def test_banners_are_independent(self):
        styler = make_styler()
        styler.color_set_for('a')
        styler.remix('b')

        assert styler.current('a').gradient is GRADIENTS[0]
        assert styler.current('b') is not styler.current('a')

    def test_remix_replaces_current_set(self):
        events = []
        styler = make_styler(events)
        styler.color_set_for('banner-1')

        remixed = styler.remix('banner-1', banner_type='leaderboard')

        assert styler.current('banner-1') is remixed
        assert remixed.gradient is FAST_REMIX_TABLE[0].gradient
        assert remixed is not FAST_REMIX_TABLE[0]
        assert {'action': 'banner_remixed', 'category': 'banner', 'label': 'leaderboard',
                'value': None, 'properties': {}} in events

    def test_vary_keeps_background(self):
        styler = make_styler()
        base = styler.color_set_for('banner-1')

        varied = styler.vary('banner-1')

        assert varied.gradient is base.gradient
        assert varied.text_color == base.text_color
        assert varied.cta_color != base.cta_color
        assert validate_color_set(varied)
        assert styler.current('banner-1') is varied

    def test_vary_without_history_generates_first(self):
        styler = make_styler()
        varied = styler.vary('fresh')
        assert varied.gradient is GRADIENTS[0]

    def test_forget_and_expiry(self):
        clock = FakeClock()
        styler = make_styler(clock=clock)
        styler.color_set_for('a')
        styler.color_set_for('b')

        styler.forget('a')
        assert styler.current('a') is None

        clock.now = 61
        assert styler.current('b') is None

    def test_defaults(self):
        styler = BannerStyler()
        assert validate_color_set(styler.color_set_for(1))
