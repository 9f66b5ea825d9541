import pytest


@pytest.fixture(autouse=True)
def codec_env(tmp_path, monkeypatch):
    """Keep log output and env configuration local to each test."""
    monkeypatch.setenv("CODEC_LOG_FILE", str(tmp_path / "logs" / "codec.log"))
    monkeypatch.setenv("PRINT_CODEC_LOGS", "false")
    # set first so a value loaded from a .env file is undone at teardown
    monkeypatch.setenv("HEX_SAMPLE", "")
    monkeypatch.delenv("HEX_SAMPLE")
    monkeypatch.chdir(tmp_path)
    return tmp_path
