from typing import Annotated, Literal

from fastmcp import FastMCP
from pydantic import Field

from forem_bridge.client import ForemClient
from forem_bridge.tools.base import call_api

Category = Literal["like", "unicorn", "readinglist", "thumbsup", "thumbsdown", "vomit", "raised_hand", "fire"]

# Off by default: the endpoint answers 401 for many personal API keys.
def register_reaction_tools(mcp: FastMCP, client: ForemClient) -> None:

   @mcp.tool()
   async def toggle_reaction(
      reactable_id: Annotated[int, Field(ge=1, description="ID of the article or comment to react to")],
      reactable_type: Annotated[Literal["Article", "Comment", "User"], Field(description="Type of the reactable entity")],
      category: Annotated[Category, Field(description="Reaction category")],
   ) -> str:
      """Toggle a reaction on an article or comment. Calling it once adds the reaction, calling it again removes it. Categories: like, unicorn, readinglist, thumbsup, thumbsdown, vomit, raised_hand, fire."""
      return await call_api("toggle_reaction", client.post("/reactions/toggle", None, {
         "reactable_id": reactable_id,
         "reactable_type": reactable_type,
         "category": category,
      }))
