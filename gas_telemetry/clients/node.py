from typing import Optional, Union
import httpx
from gas_telemetry.clients.req import STATUS_PATH, Req

Number = Union[int, str]


class NodeClient:
    """What a sensor node does every cycle: post one reading.

    Non-2xx responses raise ``httpx.HTTPStatusError``; resubmitting is up to
    the node.
    """

    def __init__(self, base_url: str, client: Optional[httpx.AsyncClient] = None):
        self.req = Req(base_url, client=client)

    async def submit(self, node: Number, mq135: Number, mq2: Number) -> dict:
        return await self.req.post(STATUS_PATH, {"node": node, "mq135": mq135, "mq2": mq2})
