import os

from icalblocker.config.settings import ServerSettings, load_settings


def test_load_settings_defaults() -> None:
    assert load_settings({}) == ServerSettings(
        host="0.0.0.0", port=8000, log_level="INFO", feed_path="/"
    )


def test_load_settings_reads_environment() -> None:
    settings = load_settings({
        "ICAL_BLOCKER_HOST": "127.0.0.1",
        "ICAL_BLOCKER_PORT": "9000",
        "ICAL_BLOCKER_LOG_LEVEL": "debug",
        "ICAL_BLOCKER_FEED_PATH": "feed.ics",
    })

    assert settings.host == "127.0.0.1"
    assert settings.port == 9000
    assert settings.log_level == "DEBUG"
    assert settings.feed_path == "/feed.ics"


def test_load_settings_ignores_bad_port() -> None:
    assert load_settings({"ICAL_BLOCKER_PORT": "http"}).port == 8000


def test_load_settings_reads_dotenv(tmp_path, monkeypatch) -> None:
    (tmp_path / ".env").write_text("ICAL_BLOCKER_PORT=8123\n")
    monkeypatch.chdir(tmp_path)
    environ = {k: v for k, v in os.environ.items() if k != "ICAL_BLOCKER_PORT"}
    monkeypatch.setattr(os, "environ", environ)

    assert load_settings().port == 8123
