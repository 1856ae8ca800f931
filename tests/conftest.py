"""
Shared pytest fixtures for rowgrid tests.
"""

import pytest
from pubsub import pub

from rowgrid.primitives import Area


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests without I/O")


@pytest.fixture
def mock_item():
    """Factory fixture for creating identifiable items."""

    class MockItem:
        def __init__(self, id=1, name="item"):
            self.id = id
            self.name = name

        def __repr__(self):
            return f"MockItem({self.id!r})"

    return MockItem


@pytest.fixture
def letters(mock_item):
    """Items A..E identified by their letter."""
    return [mock_item(id=letter, name=letter) for letter in "ABCDE"]


@pytest.fixture
def standard_area():
    """Standard 1920x1080 area for layout tests."""
    return Area(0, 0, 1920, 1080)


@pytest.fixture
def small_area():
    """Small 200x100 area for render tests."""
    return Area(0, 0, 200, 100)


@pytest.fixture
def event_recorder():
    """Records render events published on the bus."""
    from rowgrid import topics

    class Recorder:
        def __init__(self):
            self.events = []

        def started(self, row_count, item_count):
            self.events.append(("started", row_count, item_count))

        def cell(self, key, geometry):
            self.events.append(("cell", key, geometry))

        def finished(self, row_count, item_count):
            self.events.append(("finished", row_count, item_count))

    recorder = Recorder()
    subscriptions = [
        (recorder.started, topics.RENDER_STARTED),
        (recorder.cell, topics.CELL_RENDERED),
        (recorder.finished, topics.RENDER_FINISHED),
    ]
    for listener, topic in subscriptions:
        pub.subscribe(listener, topic)

    yield recorder

    for listener, topic in subscriptions:
        pub.unsubscribe(listener, topic)
