from typing import Annotated, Optional

from fastmcp import FastMCP
from pydantic import Field

from forem_bridge.client import ForemClient
from forem_bridge.tools.base import call_api, fail, segment

def register_comment_tools(mcp: FastMCP, client: ForemClient) -> None:

   @mcp.tool()
   async def get_comments(
      a_id: Annotated[Optional[int], Field(description="Article ID to get comments for")] = None,
      p_id: Annotated[Optional[int], Field(description="Podcast episode ID to get comments for")] = None,
   ) -> str:
      """Get comments for an article or podcast episode as threaded conversations. Returns top-level comments with nested replies."""
      if not a_id and not p_id:
         raise fail("Either a_id (article ID) or p_id (podcast episode ID) must be provided.")
      return await call_api("get_comments", client.get("/comments", {"a_id": a_id, "p_id": p_id}))

   @mcp.tool()
   async def get_comment_by_id(
      id: Annotated[str, Field(description="The ID code of the comment (alphanumeric string)")],
   ) -> str:
      """Get a single comment by its ID code. Returns the comment with its nested replies."""
      return await call_api("get_comment_by_id", client.get(f"/comments/{segment(id)}"))
