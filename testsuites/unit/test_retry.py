import pytest

from testsuites.ui_testing.framework.healing_config import SelfHealingConfig
from testsuites.ui_testing.framework.retry import backoff_delays, retry_async


class Flaky:
    """Fails `failures` times, then returns `result`."""

    def __init__(self, failures, result="ok", error=RuntimeError):
        self.failures = failures
        self.result = result
        self.error = error
        self.calls = 0

    async def __call__(self):
        self.calls += 1
        if self.calls <= self.failures:
            raise self.error(f"attempt {self.calls} failed")
        return self.result


@pytest.fixture
def sleeps():
    recorded = []

    async def sleep(delay_ms):
        recorded.append(delay_ms)

    sleep.recorded = recorded
    return sleep


@pytest.mark.parametrize("max_retries, delay", [(1, 1000), (3, 1000), (5, 250), (4, 0)])
def test_backoff_delays_are_exponential_and_monotonic(max_retries, delay):
    config = SelfHealingConfig(max_retries=max_retries, retry_delay_ms=delay)

    delays = backoff_delays(config)

    assert len(delays) == max_retries - 1
    assert delays == [delay * 2 ** (attempt - 1) for attempt in range(1, max_retries)]
    assert delays == sorted(delays)


async def test_success_on_first_attempt_does_not_sleep(sleeps):
    operation = Flaky(failures=0)

    result = await retry_async(operation, SelfHealingConfig(), sleep=sleeps)

    assert result == "ok"
    assert operation.calls == 1
    assert sleeps.recorded == []


async def test_recovers_after_transient_failures(sleeps):
    operation = Flaky(failures=2)

    result = await retry_async(operation, SelfHealingConfig(max_retries=3), sleep=sleeps)

    assert result == "ok"
    assert operation.calls == 3
    assert sleeps.recorded == [1000, 2000]


async def test_exhaustion_reraises_last_failure(sleeps):
    operation = Flaky(failures=10, error=ValueError)
    config = SelfHealingConfig(max_retries=4, retry_delay_ms=50)

    with pytest.raises(ValueError, match="attempt 4 failed"):
        await retry_async(operation, config, sleep=sleeps, description="flaky op")

    assert operation.calls == 4
    assert sleeps.recorded == backoff_delays(config) == [50, 100, 200]


async def test_single_attempt_never_sleeps(sleeps):
    operation = Flaky(failures=1)

    with pytest.raises(RuntimeError):
        await retry_async(operation, SelfHealingConfig(max_retries=1), sleep=sleeps)

    assert sleeps.recorded == []


async def test_default_sleep_uses_asyncio(monkeypatch):
    slept = []

    async def fake_sleep(seconds):
        slept.append(seconds)

    monkeypatch.setattr("testsuites.ui_testing.framework.retry.asyncio.sleep", fake_sleep)

    result = await retry_async(Flaky(failures=1), SelfHealingConfig(retry_delay_ms=500))

    assert result == "ok"
    assert slept == [0.5]
