" generic fixtures "
import asyncio
import tempfile
from unittest.mock import AsyncMock

import pytest
from pytest_asyncio import fixture

from .testtools import FakeYabai, MockWriter


def pytest_configure():
    "Runs once before all"
    from pyyabai.logging_setup import init_logger

    init_logger("/dev/null", force_debug=True)


@fixture
async def fake_yabai():
    "Runs a fake yabai daemon, set `reply` to choose what it answers"
    # AF_UNIX paths are limited to ~100 chars, tmp_path is often longer
    with tempfile.TemporaryDirectory(prefix="yb") as folder:
        yabai = FakeYabai(f"{folder}/s.sock")
        server = await asyncio.start_unix_server(yabai.handle, yabai.path)
        yield yabai
        server.close()
        await server.wait_closed()


@pytest.fixture
def mock_open_connection(mocker):
    reader = AsyncMock()
    writer = MockWriter()
    mock_connect = mocker.patch("asyncio.open_unix_connection", return_value=(reader, writer))
    return mock_connect, reader, writer
