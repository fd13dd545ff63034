import pytest

from pricing_engine.config.config_service import CONFIG_DIR_ENV, ENV_KEYS, ConfigService


@pytest.fixture
def config_dir(tmp_path, monkeypatch):
    """Порожня тека конфігів + чисте оточення; Singleton скидається до і після тесту."""
    for name in ENV_KEYS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv(CONFIG_DIR_ENV, str(tmp_path))
    ConfigService.reset()
    yield tmp_path
    ConfigService.reset()
