"""Shared test fixtures."""

import os

from tests.constants import ADMIN_KEY, END, LOCK_DURATION, START

# Settings require an admin key at import time; must run before src.main is imported.
os.environ["ADMIN_API_KEY"] = ADMIN_KEY

from collections.abc import AsyncGenerator, Callable  # noqa: E402

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from src.main import app  # noqa: E402
from src.sp_common.clock import FrozenClock  # noqa: E402
from src.sp_ledger.domain.ledger import Ledger  # noqa: E402
from src.sp_staking.application.service import (  # noqa: E402
    StakingApplicationService,
    get_staking_service,
)
from src.sp_staking.domain.pool import StakingPool  # noqa: E402


@pytest.fixture
def clock() -> FrozenClock:
    """Frozen one second before the mining window opens."""
    return FrozenClock(START - 1)


@pytest.fixture
def usd() -> Ledger:
    return Ledger("USD")


@pytest.fixture
def eth() -> Ledger:
    return Ledger("ETH")


@pytest.fixture
def make_pool(
    usd: Ledger, eth: Ledger, clock: FrozenClock
) -> Callable[..., StakingPool]:
    def _make(**kwargs: object) -> StakingPool:
        params: dict[str, object] = {
            "reward_per_second": 1,
            "start_time": START,
            "end_time": END,
            "lock_duration": LOCK_DURATION,
            "clock": clock,
        }
        params.update(kwargs)
        return StakingPool(usd, eth, **params)  # type: ignore[arg-type]

    return _make


@pytest.fixture
def pool(make_pool: Callable[..., StakingPool]) -> StakingPool:
    return make_pool()


@pytest.fixture
def service(pool: StakingPool) -> StakingApplicationService:
    return StakingApplicationService(pool)


@pytest.fixture
async def client(service: StakingApplicationService) -> AsyncGenerator[AsyncClient, None]:
    """Async HTTP client bound to the `service` fixture's pool."""
    app.dependency_overrides[get_staking_service] = lambda: service
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
