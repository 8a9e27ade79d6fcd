import pytest


@pytest.fixture(autouse=True)
def isolated_config_dir(tmp_path, monkeypatch):
    """Keep every test away from the real ~/.todolist."""
    config_dir = tmp_path / "todolist-home"
    monkeypatch.setenv("TODOLIST_HOME", str(config_dir))
    monkeypatch.delenv("TODOLIST_LOG_LEVEL", raising=False)
    return config_dir
