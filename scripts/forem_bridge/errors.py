from __future__ import annotations
import enum
import json
from typing import Optional

import httpx

from forem_bridge.http import REQUEST_ID, extract_rate_limit
from forem_bridge.models import HttpMethod, RateLimitInfo

class ErrorKind(str, enum.Enum):
   TRANSPORT = "transport"              # no response was ever received
   RETRY_EXHAUSTED = "retry_exhausted"  # 429/5xx on every attempt
   TERMINAL = "terminal"                # any other non-2xx, never retried

class ApiError(Exception):
   """
   The single error surfaced by the request layer.

   Branch on ``kind`` rather than subclassing: a quota problem, an outage and
   a bad request all arrive as ApiError with enough context to tell them apart.
   """

   def __init__(self, *, kind: ErrorKind, status: int, message: str, endpoint: str,
                method: HttpMethod, rate_limit: Optional[RateLimitInfo] = None,
                request_id: Optional[str] = None):
      self.kind = kind
      self.status = status
      self.detail = message
      self.endpoint = endpoint
      self.method = method
      self.rate_limit = rate_limit
      self.request_id = request_id
      super().__init__(self._compose())

   def _compose(self) -> str:
      text = f"Forem API Error ({self.status} {self.method} {self.endpoint}): {self.detail}"
      if self.request_id:
         text += f" [request-id: {self.request_id}]"
      if self.rate_limit is not None and self.rate_limit.remaining is not None:
         text += f" [rate-limit remaining: {self.rate_limit.remaining}]"
      return text

   @property
   def is_transport(self) -> bool:
      return self.kind is ErrorKind.TRANSPORT

   @property
   def is_rate_limited(self) -> bool:
      return self.status == 429

def _error_message(response: httpx.Response) -> str:
   try:
      body = response.json()
   except (json.JSONDecodeError, UnicodeDecodeError):
      return f"API request failed with status {response.status_code}: {response.reason_phrase}"
   message = body.get("error") if isinstance(body, dict) else None
   if message:
      return str(message)
   return f"API request failed with status {response.status_code}"

def api_error_from_response(response: httpx.Response, *, kind: ErrorKind, endpoint: str,
                            method: HttpMethod) -> ApiError:
   return ApiError(
      kind=kind,
      status=response.status_code,
      message=_error_message(response),
      endpoint=endpoint,
      method=method,
      rate_limit=extract_rate_limit(response.headers),
      request_id=response.headers.get(REQUEST_ID),
   )

def api_error_from_transport(exc: BaseException, *, attempts: int, endpoint: str,
                             method: HttpMethod) -> ApiError:
   reason = str(exc) or type(exc).__name__
   return ApiError(
      kind=ErrorKind.TRANSPORT,
      status=0,
      message=f"Request failed after {attempts} attempts: {reason}",
      endpoint=endpoint,
      method=method,
   )
