"""Fixtures for service-layer tests."""

import pytest

from tuneup.domain.title_filter import TitleFilter
from tuneup.service_layer.runner import Runner
from tuneup.service_layer.session import Session

from tests.unit.service_layer.fakes import EventLog, FakeResultLogger, FakeTargetProvider

# pylint: disable=redefined-outer-name


@pytest.fixture
def events() -> EventLog:
    """Shared ordered event log."""
    return EventLog()


@pytest.fixture
def provider(events) -> FakeTargetProvider:
    """Target provider recording into `events`."""
    return FakeTargetProvider(events)


@pytest.fixture
def runner(events, provider) -> Runner:
    """Runner without a title filter."""
    return Runner(provider, FakeResultLogger(events))


@pytest.fixture
def session(runner) -> Session:
    """Session around `runner`."""
    return Session(runner)


@pytest.fixture
def make_session(events, provider):
    """Factory for a session with the given title patterns."""

    def _make(patterns=None) -> Session:
        return Session(
            Runner(provider, FakeResultLogger(events), TitleFilter.from_patterns(patterns))
        )

    return _make
