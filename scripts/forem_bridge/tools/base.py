from __future__ import annotations
import json
import logging
from typing import Annotated, Any, Awaitable, Optional
from urllib.parse import quote

from fastmcp.exceptions import ToolError
from pydantic import Field

from forem_bridge.errors import ApiError

log = logging.getLogger("forem.tools")

Page = Annotated[Optional[int], Field(ge=1, description="Pagination page number")]
PerPage = Annotated[Optional[int], Field(ge=1, le=1000, description="Number of items per page (max 1000)")]

def segment(value: Any) -> str:
   """Percent-encode a caller-supplied value for use as one path segment."""
   return quote(str(value), safe="")

def render(payload: Any) -> str:
   return json.dumps(payload, indent=2, ensure_ascii=False)

def fail(message: str) -> ToolError:
   return ToolError(f"Error: {message}")

async def call_api(tool: str, call: Awaitable[Any]) -> str:
   """
   Await *call* and serialize its payload for the tool result.

   Failures never escape as raw exceptions: they are re-raised as ToolError,
   which FastMCP reports back as a result flagged ``isError``.
   """
   try:
      payload = await call
   except ApiError as exc:
      log.warning("%s failed: %s", tool, exc)
      raise fail(str(exc)) from exc
   except Exception as exc:
      log.exception("%s raised unexpectedly", tool)
      raise fail(str(exc) or type(exc).__name__) from exc
   log.debug("%s ok", tool)
   return render(payload)
