import pytest

from kmutnb.adobe_renew.config import Config


def pytest_addoption(parser):
    parser.addoption("--run-manual", action="store_true", default=False, help="run manual tests")


def pytest_configure(config):
    config.addinivalue_line("markers", "manual: mark test as manual to run")


def pytest_collection_modifyitems(config, items):
    skip_manual = pytest.mark.skip(reason="need --run-manual option to run")

    run_manual = config.getoption("--run-manual")

    for item in items:
        if "manual" in item.keywords and not run_manual:
            item.add_marker(skip_manual)


@pytest.fixture
def conf():
    conf = Config()
    conf.username = "s6501234567890"
    conf.password = "hunter2"
    return conf


@pytest.fixture
def kmutnb_env(monkeypatch):
    """Credentials in the environment, with any local .env ignored."""
    for var in ("KMUTNB_INSECURE", "KMUTNB_TIMEOUT", "KMUTNB_HOSTNAME"):
        monkeypatch.delenv(var, raising=False)
    monkeypatch.setenv("KMUTNB_USERNAME", "s6501234567890")
    monkeypatch.setenv("KMUTNB_PASSWORD", "hunter2")
    monkeypatch.setattr("kmutnb.adobe_renew.config.load_dotenv", lambda: None)
