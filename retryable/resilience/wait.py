"""Suspend primitive used between retry attempts."""

import asyncio


async def wait(duration_ms: float) -> None:
    """Suspend the caller for at least ``duration_ms`` milliseconds."""
    await asyncio.sleep(max(duration_ms, 0) / 1000)
