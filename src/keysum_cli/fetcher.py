from __future__ import annotations
from dataclasses import dataclass
from typing import Optional
import logging
import httpx
from .config import SummarizerConfig
from .parser import html_to_text

log = logging.getLogger(__name__)

_HTML_TYPES = ("text/html", "application/xhtml+xml")


@dataclass
class FetchResult:
    url: str
    html: Optional[str] = None
    text: Optional[str] = None
    status: Optional[int] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.html is not None


async def fetch_page(client: httpx.AsyncClient, url: str, cfg: SummarizerConfig) -> FetchResult:
    headers = {"User-Agent": cfg.user_agent, **(cfg.headers or {})}
    try:
        r = await client.get(
            url, headers=headers, timeout=httpx.Timeout(cfg.timeout_s), follow_redirects=True
        )
    except (httpx.HTTPError, httpx.InvalidURL) as ex:
        log.debug("fetch %s failed: %r", url, ex)
        return FetchResult(url=url, error=repr(ex))

    status = r.status_code
    if not 200 <= status < 300:
        return FetchResult(url=url, status=status, error=f"HTTP {status}")
    # basic content-type check
    ct = r.headers.get("Content-Type", "")
    if ct and not any(t in ct for t in _HTML_TYPES):
        return FetchResult(url=url, status=status, error=f"Unsupported content type: {ct}")
    return FetchResult(url=url, html=r.text, status=status)


async def fetch_text(
    url: str,
    cfg: SummarizerConfig,
    transport: Optional[httpx.AsyncBaseTransport] = None,
) -> FetchResult:
    """Fetch one page and fill in its visible text."""
    async with httpx.AsyncClient(transport=transport) as client:
        res = await fetch_page(client, url, cfg)
    if res.ok:
        res.text = html_to_text(res.html or "")
    return res
