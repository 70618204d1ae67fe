# src/http_client.py
from __future__ import annotations
import sys, asyncio, random, uuid
from typing import Optional
import httpx

class RetryPolicy:
    def __init__(
        self,
        retries: int = 1,
        backoff_base: float = 0.25,
        backoff_cap: float = 4.0,
        retry_statuses: set[int] | None = None,
    ):
        # retries counts total attempts; 1 means a single request
        self.retries = max(1, retries)
        self.backoff_base = backoff_base
        self.backoff_cap = backoff_cap
        self.retry_statuses = retry_statuses or {500, 502, 503, 504}

    def sleep_seconds(self, attempt: int) -> float:
        # exponential (0.25, 0.5, 1, 2, 4) + jitter [0..0.5]
        return min(self.backoff_cap, self.backoff_base * (2 ** (attempt - 1))) + random.uniform(0, 0.5)

class HttpClient:
    """
    - Reusable async HTTP client for the feed endpoints:
      - base_url
      - httpx timeouts
      - optional retry policy (5xx + network), off by default
      - 4xx fail fast
    """

    def __init__(
        self,
        base_url: str,
        connect_timeout: float,
        read_timeout: float,
        retries: int = 1,
        *,
        retry_statuses: Optional[set[int]] = None,
        default_headers: Optional[dict[str, str]] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = httpx.Timeout(
            connect=connect_timeout,
            read=read_timeout,
            write=read_timeout,
            pool=read_timeout,
        )
        self.policy = RetryPolicy(retries=retries, retry_statuses=retry_statuses)
        self.default_headers = {"Accept": "application/json", **(default_headers or {})}
        self._client: Optional[httpx.AsyncClient] = None

    async def __aenter__(self):
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=self.timeout,
            headers=self.default_headers,
            follow_redirects=True,
        )
        return self

    async def __aexit__(self, exc_type, exc, tb):
        if self._client is not None:
            await self._client.aclose()

    def _is_transient(self, exc: Exception) -> bool:
        if isinstance(exc, httpx.HTTPStatusError):
            return exc.response.status_code in self.policy.retry_statuses
        return isinstance(exc, httpx.TransportError)

    async def request(self, method: str, path: str, **kwargs) -> httpx.Response:
        """
        Send one request; only transient failures (retryable 5xx, transport
        errors) are tried again, and only while the policy has attempts left.
        Each request carries an X-Request-Id for tracing across log lines.
        """
        assert self._client is not None, "HttpClient used outside 'async with'"
        req_id = kwargs.pop("req_id", str(uuid.uuid4()))
        kwargs["headers"] = {"X-Request-Id": req_id, **kwargs.pop("headers", {})}
        attempts = self.policy.retries

        for attempt in range(1, attempts + 1):
            try:
                resp = await self._client.request(method, path, **kwargs)
                resp.raise_for_status()
                return resp
            except httpx.HTTPError as e:
                if attempt == attempts or not self._is_transient(e):
                    print(f"[req#{req_id}] [giving up] {method} {self.base_url}{path} "
                          f"after {attempt} attempt(s): {e}", file=sys.stderr)
                    raise
                sleep = self.policy.sleep_seconds(attempt)
                print(f"[req#{req_id}] [retry {attempt}/{attempts}] {method} {path}: {e}. "
                      f"Sleeping {sleep:.2f}s", file=sys.stderr)
                await asyncio.sleep(sleep)
        raise RuntimeError("unreachable: retry loop exited without a result")

    async def get_bytes(self, path: str, **kwargs) -> bytes:
        """GET `path` and return the raw body; the caller decides how to decode it."""
        resp = await self.request("GET", path, **kwargs)
        return resp.content
