"""Example demonstrating the retry engine and decorator."""

import asyncio

from retryable import MaxRetryAttemptsReached, conditions, delays, retry, retryable


async def flaky_api_call(attempt_counter):
    """Simulates a flaky API that fails first 2 times."""
    attempt_counter[0] += 1
    print(f"  Attempt {attempt_counter[0]}...", end=" ")

    if attempt_counter[0] < 3:
        print("❌ Failed (simulated error)")
        raise ConnectionError("API temporarily unavailable")

    print("✅ Success!")
    return {"status": "ok", "data": "API response"}


class RateLimitedClient:
    """Client whose responses report HTTP 429 without raising."""

    def __init__(self):
        self.calls = 0

    @retryable(
        retry_when=conditions.custom().on_condition(lambda status: status == 429).to_condition(),
        max_retries=4,
        delay=delays.potential(100),
        throw_max_attempt_error=True,
    )
    async def get_status(self) -> int:
        self.calls += 1
        return 429 if self.calls < 3 else 200


async def main():
    print("🔄 Testing Retry Mechanism\n")

    # Example 1: Successful retry
    print("Example 1: Flaky API that succeeds on 3rd attempt")
    attempt_counter = [0]
    result = await retry(
        lambda: flaky_api_call(attempt_counter),
        retry_when=conditions.on_any_error(),
        max_retries=4,
        delay=delays.potential(500),
    )
    print(f"  Result: {result}\n")

    # Example 2: Retrying on a result instead of an error
    print("Example 2: Rate limited responses")
    client = RateLimitedClient()
    status = await client.get_status()
    print(f"  Status {status} after {client.calls} calls\n")

    # Example 3: Budget exhausted
    print("Example 3: Budget exhausted")
    try:
        await retry(
            lambda: flaky_api_call([-10]),
            retry_when=conditions.on_any_error(),
            max_retries=1,
            delay=delays.constant(100),
            throw_max_attempt_error=True,
            name_of_operation="flaky_api_call",
        )
    except MaxRetryAttemptsReached as e:
        print(f"  {e}\n")

    print("✅ All retry examples completed successfully!")


if __name__ == "__main__":
    asyncio.run(main())
