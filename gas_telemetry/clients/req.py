from typing import Optional
import httpx

headers = {"Content-Type": "application/json", "accept": "application/json"}

STATUS_PATH = "api/status"


class Req:
    """Thin async JSON client for the status endpoint.

    Without an injected ``client`` every call opens its own
    ``httpx.AsyncClient``.
    """

    def __init__(self, base_url: str, client: Optional[httpx.AsyncClient] = None, timeout: float = 10.0):
        self.base_url = base_url.rstrip("/")
        self.client = client
        self.timeout = timeout

    def url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    async def _send(self, client: httpx.AsyncClient, method: str, path: str, **kwargs) -> httpx.Response:
        res = await client.request(method, self.url(path), headers=headers, **kwargs)
        if not (200 <= res.status_code < 300):
            res.raise_for_status()
        return res

    async def request(self, method: str, path: str, **kwargs):
        if self.client is not None:
            res = await self._send(self.client, method, path, **kwargs)
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                res = await self._send(client, method, path, **kwargs)
        return res.json()

    async def get(self, path: str, params: Optional[dict] = None):
        return await self.request("GET", path, params=params)

    async def post(self, path: str, data: dict):
        return await self.request("POST", path, json=data)
