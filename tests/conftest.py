import pytest

import mudtest


@pytest.fixture
def world():
    """World with the door closed and unlocked."""
    return mudtest.make_door_world(closed=True, locked=False)


@pytest.fixture
def open_world():
    """World with the door open and unlocked."""
    return mudtest.make_door_world(closed=False, locked=False)
