import asyncio

import pytest

from emojimap import main
from emojimap.emitter import render_mapping
from emojimap.errors import FetchError


def patch_sources(monkeypatch, github_data, unicode_data):
    async def get_github_data():
        if isinstance(github_data, Exception):
            raise github_data
        return github_data

    async def get_unicode_data():
        return unicode_data

    monkeypatch.setattr(main, "get_github_data", get_github_data)
    monkeypatch.setattr(main, "get_unicode_data", get_unicode_data)


def test_main(monkeypatch, tmp_path):
    output = tmp_path / "emoji-annotation-to-unicode.js"
    monkeypatch.setattr(main, "OUTPUT_FILENAME", output)
    patch_sources(monkeypatch, {"thumbsup": "1f44d"}, {"thumbs_up": "1f44d-fe0f", "grinning_face": "1f600"})

    asyncio.run(main.main())

    assert output.read_text() == render_mapping({"thumbsup": "1f44d-fe0f", "grinning_face": "1f600"})


def test_run_main_unmatched_keeps_output(monkeypatch, tmp_path):
    output = tmp_path / "emoji-annotation-to-unicode.js"
    output.write_text("previous")
    monkeypatch.setattr(main, "OUTPUT_FILENAME", output)
    monkeypatch.setattr(main, "SENTRY_DSN", None)
    patch_sources(monkeypatch, {"thumbsup": "1f44d"}, {"grinning_face": "1f600"})

    with pytest.raises(SystemExit) as exc_info:
        main.run_main()

    assert exc_info.value.code == 1
    assert output.read_text() == "previous"


def test_run_main_fetch_error(monkeypatch, tmp_path):
    output = tmp_path / "emoji-annotation-to-unicode.js"
    monkeypatch.setattr(main, "OUTPUT_FILENAME", output)
    monkeypatch.setattr(main, "SENTRY_DSN", None)
    patch_sources(monkeypatch, FetchError("https://api.github.com/emojis", OSError("boom")), {})

    with pytest.raises(SystemExit):
        main.run_main()

    assert not output.exists()


def test_get_version_not_installed(monkeypatch):
    def version(name):
        raise main.PackageNotFoundError(name)

    monkeypatch.setattr(main, "version", version)

    assert main.get_version() == "unknown"


def test_run_main_sentry_without_installed_package(monkeypatch, tmp_path):
    calls = []

    def version(name):
        raise main.PackageNotFoundError(name)

    output = tmp_path / "emoji-annotation-to-unicode.js"
    monkeypatch.setattr(main, "OUTPUT_FILENAME", output)
    monkeypatch.setattr(main, "SENTRY_DSN", "https://public@sentry.example.com/1")
    monkeypatch.setattr(main, "version", version)
    monkeypatch.setattr(main, "setup_sentry", lambda *args: calls.append(args))
    patch_sources(monkeypatch, {}, {"grinning_face": "1f600"})

    main.run_main()

    assert calls == [("https://public@sentry.example.com/1", "emojimap", "unknown")]
    assert output.read_text() == render_mapping({"grinning_face": "1f600"})
