import logging

from tenpin.utils import sentry


def test_init_sentry_skipped_without_dsn(monkeypatch):
    calls = []
    monkeypatch.setattr(sentry.sentry_sdk, "init", lambda **kw: calls.append(kw))
    assert sentry.init_sentry() is False
    assert calls == []


def test_init_sentry_with_dsn(monkeypatch):
    calls = []
    monkeypatch.setattr(sentry.sentry_sdk, "init", lambda **kw: calls.append(kw))
    monkeypatch.setenv("SENTRY_DSN", "https://key@example.invalid/1")
    monkeypatch.setenv("SENTRY_ENVIRONMENT", " staging ")
    monkeypatch.setenv("SENTRY_TRACES_SAMPLE_RATE", "0.25")
    assert sentry.init_sentry() is True
    assert calls == [
        {
            "dsn": "https://key@example.invalid/1",
            "environment": "staging",
            "traces_sample_rate": 0.25,
        }
    ]


def test_parse_sample_rate_rejects_bad_values(monkeypatch, caplog):
    monkeypatch.setenv("SENTRY_TRACES_SAMPLE_RATE", "abc")
    with caplog.at_level(logging.WARNING):
        assert sentry._parse_sample_rate("SENTRY_TRACES_SAMPLE_RATE", 0.1) == 0.1
    assert "not a valid float" in caplog.text

    monkeypatch.setenv("SENTRY_TRACES_SAMPLE_RATE", "2")
    assert sentry._parse_sample_rate("SENTRY_TRACES_SAMPLE_RATE") == 0.0
