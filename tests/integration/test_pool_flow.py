"""HTTP tests for the /pool and /ledger endpoints.

Runs against the ASGI app in-process; the `client` fixture binds the routes
to a pool driven by a FrozenClock.
"""

from httpx import AsyncClient

from src.sp_common.clock import FrozenClock
from src.sp_ledger.domain.ledger import Ledger
from src.sp_staking.application.service import StakingApplicationService
from tests.constants import END, LOCK_DURATION, START

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


async def _deposit(client: AsyncClient, staker: str, amount: float, **extra: int) -> dict:
    resp = await client.post(
        "/api/v1/pool/deposit", json={"staker": staker, "amount": amount, **extra}
    )
    assert resp.status_code == 200, resp.text
    return resp.json()["data"]


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestHealth:
    async def test_health(self, client: AsyncClient) -> None:
        resp = await client.get("/health")
        assert resp.status_code == 200
        assert resp.json()["status"] == "ok"


class TestDeposit:
    async def test_new_slot(
        self, client: AsyncClient, usd: Ledger, clock: FrozenClock
    ) -> None:
        usd.mint("alice", 500)
        clock.set(START)
        data = await _deposit(client, "alice", 200)
        assert data["deposit_id"] == 0
        assert data["amount"] == 200
        assert data["lock_to"] == START + LOCK_DURATION
        assert usd.balance_of("alice") == 300

    async def test_top_up_existing_slot(
        self, client: AsyncClient, usd: Ledger, clock: FrozenClock
    ) -> None:
        usd.mint("alice", 500)
        clock.set(START)
        await _deposit(client, "alice", 200)
        data = await _deposit(client, "alice", 300, deposit_id=0)
        assert data["deposit_id"] == 0
        assert data["amount"] == 500

    async def test_unknown_slot_returns_404(
        self, client: AsyncClient, usd: Ledger, clock: FrozenClock
    ) -> None:
        usd.mint("alice", 500)
        clock.set(START)
        resp = await client.post(
            "/api/v1/pool/deposit", json={"staker": "alice", "amount": 1, "deposit_id": 4}
        )
        assert resp.status_code == 404
        assert resp.json()["code"] == 2007

    async def test_outside_window_uses_error_envelope(
        self, client: AsyncClient, usd: Ledger
    ) -> None:
        usd.mint("alice", 500)
        resp = await client.post("/api/v1/pool/deposit", json={"staker": "alice", "amount": 1})
        assert resp.status_code == 422
        body = resp.json()
        assert body["code"] == 2003
        assert body["message"].startswith("Invalid time")
        assert body["data"] is None

    async def test_insufficient_balance(self, client: AsyncClient, clock: FrozenClock) -> None:
        clock.set(START)
        resp = await client.post("/api/v1/pool/deposit", json={"staker": "bob", "amount": 1})
        assert resp.status_code == 422
        assert resp.json()["code"] == 1002

    async def test_pool_account_rejected(
        self,
        client: AsyncClient,
        service: StakingApplicationService,
        usd: Ledger,
        clock: FrozenClock,
    ) -> None:
        usd.mint("alice", 1000)
        clock.set(START)
        await _deposit(client, "alice", 1000)
        resp = await client.post(
            "/api/v1/pool/deposit", json={"staker": service.pool.account_id, "amount": 1000}
        )
        assert resp.status_code == 422
        assert resp.json()["code"] == 2009
        assert service.pool.total_staking_tokens == 1000

    async def test_non_positive_amount_rejected_by_schema(self, client: AsyncClient) -> None:
        resp = await client.post("/api/v1/pool/deposit", json={"staker": "alice", "amount": 0})
        assert resp.status_code == 422

    async def test_paused_returns_423(
        self, client: AsyncClient, service: StakingApplicationService
    ) -> None:
        service.pool.pause(True)
        resp = await client.post("/api/v1/pool/deposit", json={"staker": "alice", "amount": 1})
        assert resp.status_code == 423
        assert resp.json()["code"] == 2001


class TestWithdraw:
    async def test_withdraw_after_lock(
        self,
        client: AsyncClient,
        service: StakingApplicationService,
        usd: Ledger,
        eth: Ledger,
        clock: FrozenClock,
    ) -> None:
        usd.mint("alice", 1000)
        service.pool.add_reward_tokens(1000)
        clock.set(START)
        await _deposit(client, "alice", 1000)
        clock.set(END)
        resp = await client.post(
            "/api/v1/pool/withdraw", json={"staker": "alice", "amount": 1000, "deposit_id": 0}
        )
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["withdrawn"] == 1000
        assert data["reward_paid"] == eth.balance_of("alice")
        assert usd.balance_of("alice") == 1000

    async def test_withdraw_while_locked(
        self, client: AsyncClient, usd: Ledger, clock: FrozenClock
    ) -> None:
        usd.mint("alice", 1000)
        clock.set(START)
        await _deposit(client, "alice", 1000)
        resp = await client.post(
            "/api/v1/pool/withdraw", json={"staker": "alice", "amount": 1000, "deposit_id": 0}
        )
        assert resp.status_code == 422
        assert resp.json()["code"] == 2005

    async def test_withdraw_without_reward_supply(
        self, client: AsyncClient, usd: Ledger, clock: FrozenClock
    ) -> None:
        usd.mint("alice", 1000)
        clock.set(START)
        await _deposit(client, "alice", 1000)
        clock.set(END)
        resp = await client.post(
            "/api/v1/pool/withdraw", json={"staker": "alice", "amount": 1000, "deposit_id": 0}
        )
        assert resp.status_code == 422
        assert resp.json()["code"] == 2006
        assert usd.balance_of("alice") == 0


class TestReadViews:
    async def test_state(self, client: AsyncClient, clock: FrozenClock) -> None:
        resp = await client.get("/api/v1/pool/state")
        assert resp.status_code == 200
        data = resp.json()["data"]
        assert data["start_time"] == START
        assert data["end_time"] == END
        assert data["now"] == clock.now()

    async def test_user(self, client: AsyncClient, usd: Ledger, clock: FrozenClock) -> None:
        usd.mint("alice", 300)
        clock.set(START)
        await _deposit(client, "alice", 100)
        await _deposit(client, "alice", 200)
        resp = await client.get("/api/v1/pool/users/alice")
        data = resp.json()["data"]
        assert data["total_amount"] == 300
        assert data["next_deposit_id"] == 2
        assert len(data["deposits"]) == 2

    async def test_unknown_user_returns_404(self, client: AsyncClient) -> None:
        resp = await client.get("/api/v1/pool/users/nobody")
        assert resp.status_code == 404
        assert resp.json()["code"] == 2008

    async def test_pending_reward(
        self, client: AsyncClient, usd: Ledger, clock: FrozenClock
    ) -> None:
        usd.mint("alice", 100)
        clock.set(START)
        await _deposit(client, "alice", 100)
        clock.set(START + 30)
        resp = await client.get("/api/v1/pool/users/alice/deposits/0/pending-reward")
        data = resp.json()["data"]
        assert abs(data["pending_reward"] - 30) < 1e-9
        assert data["as_of"] == START + 30

    async def test_pending_reward_unknown_slot(self, client: AsyncClient) -> None:
        resp = await client.get("/api/v1/pool/users/alice/deposits/0/pending-reward")
        assert resp.status_code == 404
        assert resp.json()["code"] == 2007


class TestLedger:
    async def test_balance(self, client: AsyncClient, usd: Ledger) -> None:
        usd.mint("alice", 1234.5)
        resp = await client.get("/api/v1/ledger/staked/balances/alice")
        data = resp.json()["data"]
        assert data["symbol"] == "USD"
        assert data["balance"] == 1234.5
        assert data["balance_display"] == "1,234.5"

    async def test_supply(self, client: AsyncClient, eth: Ledger) -> None:
        eth.mint("a", 1)
        eth.mint("b", 2)
        resp = await client.get("/api/v1/ledger/reward")
        data = resp.json()["data"]
        assert data["total_supply"] == 3
        assert data["account_count"] == 2

    async def test_unknown_token_rejected(self, client: AsyncClient) -> None:
        resp = await client.get("/api/v1/ledger/gold")
        assert resp.status_code == 422


class TestRequestId:
    async def test_generated_and_echoed(self, client: AsyncClient) -> None:
        resp = await client.get("/api/v1/pool/state")
        request_id = resp.headers["X-Request-ID"]
        assert request_id.startswith("req_")
        assert resp.json()["request_id"] == request_id

    async def test_caller_id_propagates_to_errors(self, client: AsyncClient) -> None:
        resp = await client.get(
            "/api/v1/pool/users/nobody", headers={"X-Request-ID": "req_fromcaller"}
        )
        assert resp.headers["X-Request-ID"] == "req_fromcaller"
        assert resp.json()["request_id"] == "req_fromcaller"
