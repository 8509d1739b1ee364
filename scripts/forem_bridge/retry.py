from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Optional, Union

import httpx

from forem_bridge.errors import ApiError, ErrorKind, api_error_from_response
from forem_bridge.http import parse_retry_after
from forem_bridge.models import RequestDescriptor

@dataclass(frozen=True, slots=True)
class RetryPolicy:
   max_retries: int = 3          # 4 attempts in total
   initial_backoff: float = 1.0  # seconds, doubled per retry

   @property
   def max_attempts(self) -> int:
      return self.max_retries + 1

def is_retryable_status(status: int) -> bool:
   return status == 429 or 500 <= status < 600

@dataclass(slots=True)
class RetryState:
   """
   Bookkeeping for one logical call, threaded through the attempt loop.

   ``attempt`` is zero-indexed and counts attempts already made and classified.
   """
   policy: RetryPolicy
   attempt: int = 0
   last_transport_error: Optional[BaseException] = None

   @property
   def attempts_made(self) -> int:
      return self.attempt + 1

   @property
   def can_retry(self) -> bool:
      return self.attempt < self.policy.max_retries

   def delay(self, retry_after: Optional[float] = None) -> float:
      if retry_after is not None:
         return retry_after
      return self.policy.initial_backoff * (2 ** self.attempt)

   def advance(self) -> None:
      self.attempt += 1

# -------- attempt outcomes ---------------------------------------------------

@dataclass(frozen=True, slots=True)
class Success:
   body: Any
   kind: str = "success"

@dataclass(frozen=True, slots=True)
class RetryableFailure:
   """A 429/5xx response or a transport error; carries what the next step needs."""
   response: Optional[httpx.Response] = None
   error: Optional[BaseException] = None
   retry_after: Optional[float] = None
   kind: str = "retryable"

   @property
   def cause(self) -> str:
      if self.response is not None:
         return f"HTTP {self.response.status_code}"
      return type(self.error).__name__ if self.error is not None else "unknown"

@dataclass(frozen=True, slots=True)
class TerminalFailure:
   error: ApiError
   kind: str = "terminal"

AttemptOutcome = Union[Success, RetryableFailure, TerminalFailure]

def classify_response(response: httpx.Response, request: RequestDescriptor) -> AttemptOutcome:
   status = response.status_code
   if 200 <= status < 300:
      if status == 204:
         return Success({})
      # a 2xx body that is not JSON is a contract violation; let ValueError surface
      return Success(response.json())
   if is_retryable_status(status):
      return RetryableFailure(response=response, retry_after=parse_retry_after(response.headers))
   return TerminalFailure(api_error_from_response(
      response, kind=ErrorKind.TERMINAL, endpoint=request.path, method=request.method,
   ))

def classify_transport_error(exc: httpx.RequestError) -> AttemptOutcome:
   # any httpx.RequestError means no usable response was obtained
   return RetryableFailure(error=exc)
