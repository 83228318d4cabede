"""Test configuration for the Mise record store."""

import asyncio
import sys
from pathlib import Path
from typing import Dict, List, Optional

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from mise.exceptions import BackendError
from mise.projects import ProductionCoordinator
from mise.storage import InMemoryBackend


class FlakyBackend(InMemoryBackend):
    """In-memory backend that can fail on demand and records every write."""

    def __init__(self, initial: Optional[Dict[str, str]] = None, yield_control: bool = False) -> None:
        super().__init__(initial)
        self.fail_reads = False
        self.fail_writes = False
        self.yield_control = yield_control
        self.writes: List[str] = []

    async def get(self, key: str) -> Optional[str]:
        if self.yield_control:
            await asyncio.sleep(0)
        if self.fail_reads:
            raise BackendError("simulated read failure")
        return await super().get(key)

    async def set(self, key: str, value: str) -> None:
        if self.yield_control:
            await asyncio.sleep(0)
        if self.fail_writes:
            raise BackendError("simulated write failure")
        self.writes.append(key)
        await super().set(key, value)


@pytest.fixture
def backend() -> FlakyBackend:
    return FlakyBackend()


@pytest.fixture
def coordinator(backend: FlakyBackend) -> ProductionCoordinator:
    coordinator = ProductionCoordinator(backend)
    asyncio.run(coordinator.initialize())
    return coordinator
