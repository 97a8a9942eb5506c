"""
API Client -- thin async HTTP client for the Company API.

Configuration:
    COMPANY_API_URL env var or fallback to http://localhost:8000
"""

from __future__ import annotations

import logging
from typing import Optional

import httpx

from company_api.config import COMPANY_API_URL

logger = logging.getLogger(__name__)

TIMEOUT = 30.0


class CompanyAPI:
    """Async HTTP client for the Company API backend."""

    def __init__(self, base_url: str = COMPANY_API_URL, transport: Optional[httpx.AsyncBaseTransport] = None):
        self._base_url = base_url.rstrip("/")
        self._transport = transport
        self._client: Optional[httpx.AsyncClient] = None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                timeout=TIMEOUT,
                transport=self._transport,
            )
        return self._client

    async def close(self):
        if self._client and not self._client.is_closed:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # Health
    # ------------------------------------------------------------------

    async def health(self) -> dict:
        """Check if the backend is alive."""
        client = await self._get_client()
        try:
            resp = await client.get("/health")
            resp.raise_for_status()
            return resp.json()
        except Exception as e:
            logger.warning("Backend health check failed: %s", e)
            return {"status": "unavailable", "error": str(e)}

    # ------------------------------------------------------------------
    # Companies
    # ------------------------------------------------------------------

    async def list_companies(self) -> Optional[list[dict]]:
        """
        Call GET /api/company.

        Returns [] when the store is empty (204) and None on error.
        """
        client = await self._get_client()
        try:
            resp = await client.get("/api/company")
            resp.raise_for_status()
            if resp.status_code == 204:
                return []
            return resp.json()
        except Exception as e:
            logger.error("List companies call failed: %s", e)
            return None

    async def get_company(self, company_id: int) -> Optional[dict]:
        client = await self._get_client()
        try:
            resp = await client.get(f"/api/company/{company_id}")
            resp.raise_for_status()
            return resp.json()
        except httpx.HTTPStatusError as e:
            logger.error("Get company API error %d: %s", e.response.status_code, e.response.text)
            return None
        except Exception as e:
            logger.error("Get company call failed for %s: %s", company_id, e)
            return None

    async def create_company(self, payload: dict) -> Optional[int]:
        """
        Call POST /api/company.

        Returns the new id, or None when the payload was rejected.
        """
        client = await self._get_client()
        try:
            resp = await client.post("/api/company", json=payload)
            resp.raise_for_status()
            return resp.json()["id"]
        except httpx.HTTPStatusError as e:
            logger.error("Create company API error %d: %s", e.response.status_code, e.response.text)
            return None
        except Exception as e:
            logger.error("Create company call failed: %s", e)
            return None

    async def delete_company(self, company_id: int) -> bool:
        return await self._send("DELETE", f"/api/company/{company_id}")

    async def update_company(self, company_id: int, patch: dict, reflection: bool = True) -> bool:
        """PATCH: only non-blank fields of ``patch`` are applied."""
        return await self._send(
            "PATCH",
            f"/api/company/{company_id}",
            json=patch,
            params={"reflection": str(reflection).lower()},
        )

    async def replace_company(self, company_id: int, company: dict) -> bool:
        """PUT: every field is overwritten, omitted ones with blanks."""
        return await self._send("PUT", f"/api/company/{company_id}", json=company)

    async def _send(self, method: str, url: str, **kwargs) -> bool:
        client = await self._get_client()
        try:
            resp = await client.request(method, url, **kwargs)
            resp.raise_for_status()
            return True
        except httpx.HTTPStatusError as e:
            logger.error("%s %s API error %d: %s", method, url, e.response.status_code, e.response.text)
            return False
        except Exception as e:
            logger.error("%s %s call failed: %s", method, url, e)
            return False
