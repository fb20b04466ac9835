import logging

import pytest

from common.factories import sample_orders as build_sample_orders

# 激活自定义插件
pytest_plugins = [
    "pytester",
    "common.plugins.pricing_plugin",
]


@pytest.fixture(scope="session")
def env(pytestconfig):
    return pytestconfig.getoption("--env")


@pytest.fixture(scope="function")
def sample_orders():
    # 每个用例拿到一份新的数据，避免相互影响
    return build_sample_orders()


@pytest.fixture(scope="function")
def pricing_env(monkeypatch):
    monkeypatch.setenv("PRICER_DISCOUNT_THRESHOLD", "1500")
    monkeypatch.setenv("PRICER_DISCOUNT_RATE", "0.1")
    monkeypatch.setenv("PRICER_TAX_RATE", "0.08")
    yield
    for name in ("PRICER_DISCOUNT_THRESHOLD", "PRICER_DISCOUNT_RATE", "PRICER_TAX_RATE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(scope="function")
def log_capture(caplog):
    logger = logging.getLogger("pricer.pricing")
    caplog.set_level(logging.DEBUG, logger=logger.name)
    return caplog
