"""Pytest fixtures for service layer handler unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import pytest

from tests.unit.service_layer.handlers.fakes import bootstrap_test_bus

if TYPE_CHECKING:
    from casework.service_layer.messagebus import MessageBus

# pylint: disable=redefined-outer-name


@pytest.fixture
def bus_params():
    """Default bus parameters. Classes can override this fixture"""
    return {}


@pytest.fixture
def make_test_bus(bus_params, id_generator) -> Callable[..., MessageBus]:
    """Factory for a message bus over in-memory repositories.

    Ids come from the deterministic `id_generator` fixture unless
    `bus_params` supplies another.
    """

    def _make():
        params = {"id_generator": id_generator, **bus_params}
        return bootstrap_test_bus(**params)

    return _make
