from typing import Annotated

from fastmcp import FastMCP
from pydantic import Field

from forem_bridge.client import ForemClient
from forem_bridge.tools.base import call_api

def register_user_tools(mcp: FastMCP, client: ForemClient) -> None:

   @mcp.tool()
   async def get_authenticated_user() -> str:
      """Get the profile of the currently authenticated DEV Community user (the owner of the API key)."""
      return await call_api("get_authenticated_user", client.get("/users/me"))

   @mcp.tool()
   async def get_user_by_username(
      username: Annotated[str, Field(description="Username or numeric user ID")],
   ) -> str:
      """Get a user's public profile by their username or numeric ID."""
      return await call_api("get_user_by_username", client.get("/users/by_username", {"url": username}))
