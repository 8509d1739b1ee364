import asyncio
from typing import Any, Awaitable, Callable, List, Optional

import httpx
import pytest

from forem_bridge.client import ForemClient

API_KEY = "test-api-key"

def json_response(body: Any, status: int = 200, headers: Optional[dict] = None) -> httpx.Response:
   return httpx.Response(status, json=body, headers=headers or {})

class Script:
   """MockTransport handler replaying *steps* in order; the last step repeats."""

   def __init__(self, *steps):
      self.steps = list(steps)
      self.requests: List[httpx.Request] = []

   def __call__(self, request: httpx.Request) -> httpx.Response:
      self.requests.append(request)
      step = self.steps.pop(0) if len(self.steps) > 1 else self.steps[0]
      if isinstance(step, Exception):
         raise step
      return step

   @property
   def attempts(self) -> int:
      return len(self.requests)

class Harness:
   def __init__(self):
      self.sleeps: List[float] = []

   async def sleep(self, seconds: float) -> None:
      self.sleeps.append(seconds)

   def run(self, script: Script, fn: Callable[[ForemClient], Awaitable[Any]], **kw) -> Any:
      async def go():
         async with httpx.AsyncClient(transport=httpx.MockTransport(script)) as http:
            client = ForemClient(API_KEY, 5.0, http=http, sleep=self.sleep, **kw)
            return await fn(client)
      return asyncio.run(go())

@pytest.fixture
def harness():
   return Harness()
