from __future__ import annotations

from datetime import datetime

import pytest

from karma_manager.storage.memory_store import InMemoryKeyValueStore


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 5, 1, 9, 0, 0)


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()
