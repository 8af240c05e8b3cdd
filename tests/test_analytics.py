"""Tests for analytics: event shapes and sink handling."""

import logging

from analytics import Analytics, AnalyticsEvent


class TestAnalytics:
    def test_enabled_forwards_to_sink(self):
        events = []
        analytics = Analytics(enabled=True, sink=events.append)

        analytics.banner_remixed('leaderboard')

        assert events == [{
            'action': 'banner_remixed',
            'category': 'banner',
            'label': 'leaderboard',
            'value': None,
            'properties': {},
        }]

    def test_disabled_does_not_forward(self, caplog):
        events = []
        analytics = Analytics(enabled=False, sink=events.append)

        with caplog.at_level(logging.DEBUG, logger='analytics'):
            analytics.banner_downloaded('square', 'auto')

        assert events == []
        assert 'banner_downloaded' in caplog.text

    def test_sink_failure_is_logged(self, caplog):
        def broken(event):
            raise RuntimeError('endpoint down')

        analytics = Analytics(enabled=True, sink=broken)
        analytics.error('render', 'boom', {'banner': 3})

        assert 'endpoint down' in caplog.text

    def test_event_payloads(self):
        events = []
        analytics = Analytics(enabled=True, sink=events.append)

        analytics.banner_generation_started('health', 'summer', 'en')
        analytics.banner_generation_completed('health', 4, 1.25)
        analytics.color_set_generated('remix', 'Frame 69')
        analytics.error('llm', 'timeout', {'attempt': 2})

        assert [e['action'] for e in events] == [
            'banner_generation_started',
            'banner_generation_completed',
            'color_set_generated',
            'error',
        ]
        assert events[0]['properties'] == {'lob': 'health', 'theme': 'summer', 'language': 'en'}
        assert events[1]['value'] == 1.25
        assert events[2]['label'] == 'remix'
        assert events[3]['properties'] == {'message': 'timeout', 'attempt': 2}

    def test_track_custom_event(self):
        events = []
        Analytics(enabled=True, sink=events.append).track(
            AnalyticsEvent(action='dropdown_changed', category='interaction', label='lob'))
        assert events[0]['label'] == 'lob'
