from __future__ import annotations
import math
from contextlib import asynccontextmanager
from typing import Mapping, Optional

import httpx

from forem_bridge.models import QueryValue, RateLimitInfo

BASE_URL = "https://dev.to/api"
ACCEPT_HEADER = "application/vnd.forem.api-v1+json"
USER_AGENT = "forem-bridge/1.0.0"

RATELIMIT_LIMIT = "x-ratelimit-limit"
RATELIMIT_REMAINING = "x-ratelimit-remaining"
RATELIMIT_RESET = "x-ratelimit-reset"
RETRY_AFTER = "retry-after"
REQUEST_ID = "x-request-id"

@asynccontextmanager
async def make_client(*, timeout: float = 30.0):
   async with httpx.AsyncClient(http2=True, timeout=timeout, follow_redirects=True, headers={
      "User-Agent": USER_AGENT,
      "Accept": ACCEPT_HEADER,
   }) as client:
      yield client

def _query_string(value: QueryValue) -> str:
   if isinstance(value, bool):
      return "true" if value else "false"
   return str(value)

def build_url(path: str, params: Optional[Mapping[str, QueryValue]] = None, *,
              base_url: str = BASE_URL) -> str:
   """
   Join *path* onto the API base and append the non-empty query parameters.

   None and "" are skipped entirely so they never show up as ``key=``.
   Remaining keys keep their input order.
   """
   url = httpx.URL(base_url.rstrip("/") + path)
   if not params:
      return str(url)
   kept = [(k, _query_string(v)) for k, v in params.items() if v is not None and v != ""]
   if not kept:
      return str(url)
   return str(url.copy_merge_params(kept))

def _header_int(headers: httpx.Headers, name: str) -> Optional[int]:
   raw = headers.get(name)
   if raw is None:
      return None
   try:
      return int(raw.strip())
   except ValueError:
      return None

def extract_rate_limit(headers: httpx.Headers) -> RateLimitInfo:
   return RateLimitInfo(
      limit=_header_int(headers, RATELIMIT_LIMIT),
      remaining=_header_int(headers, RATELIMIT_REMAINING),
      reset=_header_int(headers, RATELIMIT_RESET),
   )

def parse_retry_after(headers: httpx.Headers) -> Optional[float]:
   """Seconds requested by a numeric Retry-After header, or None."""
   raw = headers.get(RETRY_AFTER)
   if not raw:
      return None
   try:
      seconds = float(raw.strip())
   except ValueError:
      return None
   if not math.isfinite(seconds) or seconds < 0:
      return None
   return seconds
