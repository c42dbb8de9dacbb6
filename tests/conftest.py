import logging

import pytest

from fakes import FakeCloud


@pytest.fixture
def cloud():
    return FakeCloud(regions=["us-east-1"])


@pytest.fixture
def gateway(cloud):
    return cloud.gateway("us-east-1")


@pytest.fixture
def info_logs(caplog):
    caplog.set_level(logging.INFO)
    return caplog
