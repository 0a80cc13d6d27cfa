import pytest

from puzzle_helpers import RecordingListener, strip_puzzle


@pytest.fixture
def listener():
    return RecordingListener()


@pytest.fixture
def puzzle(listener):
    return strip_puzzle(listener)
