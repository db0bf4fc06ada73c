import logging
from typing import Dict, List, Optional
from urllib.parse import quote

import httpx

from leakchecker import config
from leakchecker.errors import UpstreamError

logger = logging.getLogger(__name__)

# Characters encodeURIComponent leaves alone besides the unreserved set.
_EMAIL_SAFE = "!~*'()"


def account_path(email: str) -> str:
    return f"/breachedaccount/{quote(email, safe=_EMAIL_SAFE)}"


class HIBPClient:
    """Thin client for the HIBP v3 breachedaccount lookup. One request per call."""

    def __init__(
        self,
        base_url: str = config.HIBP_API_URL,
        api_key: str = config.HIBP_API_KEY,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.transport = transport

    @property
    def headers(self) -> Dict[str, str]:
        headers = {"User-Agent": config.USER_AGENT}
        if self.api_key:
            headers["hibp-api-key"] = self.api_key
        return headers

    async def breached_account(self, email: str) -> List[Dict]:
        """Full breach records for the account, [] when HIBP does not know it.

        Raises UpstreamError for any other non-2xx reply. Transport errors and
        undecodable bodies propagate as httpx.HTTPError / ValueError.
        """
        url = self.base_url + account_path(email)
        params = {"truncateResponse": "false"}
        async with httpx.AsyncClient(transport=self.transport) as client:
            r = await client.get(url, headers=self.headers, params=params)
        logger.info("HIBP breachedaccount -> %s", r.status_code)
        if r.status_code == 404:
            return []  # no breaches
        if not r.is_success:
            raise UpstreamError(r.status_code)
        return r.json()
