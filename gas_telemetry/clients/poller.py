"""
Dashboard poller for the status endpoint.

Fetches the newest readings every few seconds, on demand, and whenever the
node filter changes. A failed fetch keeps the last good list on screen.

Usage:
    python -m gas_telemetry.clients.poller --node 2 --interval 5
"""

import argparse
import asyncio
from contextlib import suppress
from datetime import datetime
from typing import Callable, List, Optional

import httpx

from gas_telemetry.clients.req import STATUS_PATH, Req
from gas_telemetry.config import get_config
from gas_telemetry.logger import CustomLogger

console = CustomLogger(name="poller_logs")

COLUMNS = ("Node", "MQ135", "MQ135 Status", "MQ2", "MQ2 Status", "R1", "R2", "Created At", "Updated At")


class StatusPoller:
    def __init__(
        self,
        base_url: str,
        interval: float = 5.0,
        node: Optional[str] = None,
        on_update: Optional[Callable[[List[dict]], None]] = None,
        client: Optional[httpx.AsyncClient] = None,
    ):
        self.req = Req(base_url, client=client)
        self.interval = interval
        self.node = node or None
        self.on_update = on_update
        self.sensors: List[dict] = []
        self.last_error: Optional[Exception] = None
        self._task: Optional[asyncio.Task] = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    async def fetch(self) -> List[dict]:
        params = {"node": self.node} if self.node else None
        data = await self.req.get(STATUS_PATH, params=params)
        if not isinstance(data, dict):
            raise ValueError("Unexpected status response")
        return data.get("sensors") or []

    async def refresh(self) -> bool:
        """Fetch once. Returns False and keeps the previous list on failure."""
        try:
            sensors = await self.fetch()
        except (httpx.HTTPError, ValueError) as e:
            self.last_error = e
            console.warning(f"Status fetch failed: {e}", node=self.node)
            return False

        self.sensors = sensors
        self.last_error = None
        if self.on_update is not None:
            try:
                self.on_update(sensors)
            except Exception:
                console.exception("Status update callback failed", node=self.node)
        return True

    async def set_node(self, node: Optional[str]) -> bool:
        self.node = node or None
        return await self.refresh()

    async def _run(self):
        while True:
            await self.refresh()
            await asyncio.sleep(self.interval)

    def start(self):
        if not self.running:
            self._task = asyncio.create_task(self._run())

    async def stop(self):
        if self._task is None:
            return
        self._task.cancel()
        with suppress(asyncio.CancelledError):
            await self._task
        self._task = None


def status_badge(value: int) -> str:
    return "GAS ALERT" if value == 1 else "SAFE"


def _format_date(value: Optional[str]) -> str:
    if not value:
        return "-"
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00")).strftime("%Y-%m-%d %H:%M:%S")
    except ValueError:
        return value


def render_table(sensors: List[dict]) -> str:
    if not sensors:
        return "No sensor data available"

    rows = [
        (
            str(s.get("type", "")).replace("NODE", ""),
            str(s.get("mq135")),
            status_badge(s.get("mq135")),
            str(s.get("mq2")),
            status_badge(s.get("mq2")),
            str(s.get("r1")),
            str(s.get("r2")),
            _format_date(s.get("createdAt")),
            _format_date(s.get("updatedAt")),
        )
        for s in sensors
    ]
    widths = [max(len(col), *(len(row[i]) for row in rows)) for i, col in enumerate(COLUMNS)]

    def line(cells):
        return "  ".join(cell.ljust(width) for cell, width in zip(cells, widths)).rstrip()

    return "\n".join([line(COLUMNS), line("-" * w for w in widths)] + [line(row) for row in rows])


def main(argv=None):
    settings = get_config().poller
    parser = argparse.ArgumentParser(description="Poll the gas telemetry status endpoint")
    parser.add_argument("--base-url", default=settings["base_url"])
    parser.add_argument("--node", choices=["1", "2", "3"], default=None)
    parser.add_argument("--interval", type=float, default=settings["interval"])
    args = parser.parse_args(argv)

    def show(sensors):
        print(render_table(sensors))
        print()

    async def run():
        poller = StatusPoller(args.base_url, interval=args.interval, node=args.node, on_update=show)
        poller.start()
        try:
            await asyncio.Event().wait()
        finally:
            await poller.stop()

    with suppress(KeyboardInterrupt):
        asyncio.run(run())


if __name__ == "__main__":
    main()
