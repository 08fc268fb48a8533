# Test configuration
import sys
from pathlib import Path

import pytest

REPO_ROOT = Path(__file__).parent.parent

# Add repo root to path so tests can import modules
sys.path.insert(0, str(REPO_ROOT))

from tests.fakes import FakeRedis, UnreachableRedis  # noqa: E402
from tasklist.tasks.store import TaskStore  # noqa: E402


@pytest.fixture
def fake_redis() -> FakeRedis:
    return FakeRedis()


@pytest.fixture
def store(fake_redis) -> TaskStore:
    return TaskStore(fake_redis, key="tasks")


@pytest.fixture
def unreachable_store() -> TaskStore:
    return TaskStore(UnreachableRedis(), key="tasks")
