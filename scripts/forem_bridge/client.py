from __future__ import annotations
import asyncio
import logging
from typing import Any, Awaitable, Callable, Dict, Mapping

import httpx

from forem_bridge.errors import ApiError, ErrorKind, api_error_from_response, api_error_from_transport
from forem_bridge.http import ACCEPT_HEADER, BASE_URL, USER_AGENT, build_url, make_client
from forem_bridge.models import QueryValue, RequestDescriptor
from forem_bridge.retry import (
   RetryableFailure,
   RetryPolicy,
   RetryState,
   Success,
   TerminalFailure,
   classify_response,
   classify_transport_error,
)

DEFAULT_TIMEOUT = 30.0

Sleep = Callable[[float], Awaitable[None]]

class ForemClient:
   """
   Resilient client for the Forem (DEV.to) REST API.

   Usage:
      async with ForemClient(api_key) as client:
         articles = await client.get("/articles", {"per_page": 5})

   Every verb returns the parsed JSON payload or raises ApiError once retries
   are exhausted. Outside ``async with`` (and without an injected ``http``
   client) each call opens a short-lived connection pool of its own.
   """

   def __init__(self, api_key: str, timeout: float = DEFAULT_TIMEOUT, *,
                base_url: str = BASE_URL,
                http: httpx.AsyncClient | None = None,
                policy: RetryPolicy | None = None,
                sleep: Sleep | None = None,
                logger: logging.Logger | None = None):
      self._api_key = api_key
      self._timeout = timeout
      self.base_url = base_url
      self.policy = policy or RetryPolicy()
      self._external_http = http
      self._http = http
      self._sleep = sleep or asyncio.sleep
      self.log = logger or logging.getLogger("forem.http")

   @property
   def timeout(self) -> float:
      return self._timeout

   # -------- lifecycle ------------------------------------------------------

   async def __aenter__(self) -> "ForemClient":
      if self._http is None:
         self._client_cm = make_client(timeout=self._timeout)
         self._http = await self._client_cm.__aenter__()
      return self

   async def __aexit__(self, exc_type, exc, tb):
      if self._http is not None and self._external_http is None:
         await self._client_cm.__aexit__(exc_type, exc, tb)
         self._http = None

   # -------- public verbs ---------------------------------------------------

   async def get(self, path: str, query: Mapping[str, QueryValue] | None = None,
                 authenticated: bool = True) -> Any:
      return await self.request(RequestDescriptor("GET", path, query=query, authenticated=authenticated))

   async def post(self, path: str, body: Dict[str, Any] | None = None,
                  query: Mapping[str, QueryValue] | None = None) -> Any:
      return await self.request(RequestDescriptor("POST", path, query=query, body=body))

   async def put(self, path: str, body: Dict[str, Any] | None = None) -> Any:
      return await self.request(RequestDescriptor("PUT", path, body=body))

   # -------- request layer --------------------------------------------------

   def headers(self, authenticated: bool) -> Dict[str, str]:
      headers = {
         "accept": ACCEPT_HEADER,
         "content-type": "application/json",
         "user-agent": USER_AGENT,
      }
      if authenticated:
         headers["api-key"] = self._api_key
      return headers

   async def request(self, req: RequestDescriptor) -> Any:
      """Run one logical call across attempts; all network I/O goes through here."""
      if self._http is not None:
         return await self._execute(self._http, req)
      async with make_client(timeout=self._timeout) as http:
         return await self._execute(http, req)

   async def _execute(self, http: httpx.AsyncClient, req: RequestDescriptor) -> Any:
      url = build_url(req.path, req.query, base_url=self.base_url)
      headers = self.headers(req.authenticated)
      body = req.body if req.sends_body else None
      state = RetryState(self.policy)

      while True:
         self.log.debug("%s %s (attempt %d/%d)", req.method, req.path,
                        state.attempts_made, self.policy.max_attempts)
         try:
            response = await http.request(req.method, url, headers=headers, json=body,
                                          timeout=self._timeout)
         except httpx.RequestError as exc:
            state.last_transport_error = exc
            outcome = classify_transport_error(exc)
         else:
            outcome = classify_response(response, req)

         if isinstance(outcome, Success):
            return outcome.body
         if isinstance(outcome, TerminalFailure):
            self.log.error("%s", outcome.error)
            raise outcome.error

         if not state.can_retry:
            raise self._exhausted(outcome, state, req)

         delay = state.delay(outcome.retry_after)
         self.log.warning("%s %s failed with %s on attempt %d/%d; retrying in %.2fs",
                          req.method, req.path, outcome.cause, state.attempts_made,
                          self.policy.max_attempts, delay)
         await self._sleep(delay)
         state.advance()

   def _exhausted(self, outcome: RetryableFailure, state: RetryState, req: RequestDescriptor) -> ApiError:
      if outcome.response is not None:
         err = api_error_from_response(outcome.response, kind=ErrorKind.RETRY_EXHAUSTED,
                                       endpoint=req.path, method=req.method)
      else:
         err = api_error_from_transport(state.last_transport_error or outcome.error,
                                        attempts=state.attempts_made,
                                        endpoint=req.path, method=req.method)
      self.log.error("%s", err)
      return err
