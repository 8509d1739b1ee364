from __future__ import annotations
from typing import Callable, List

from fastmcp import FastMCP

from forem_bridge.client import ForemClient
from forem_bridge.tools.articles import register_article_tools
from forem_bridge.tools.comments import register_comment_tools
from forem_bridge.tools.followers import register_follower_tools
from forem_bridge.tools.organizations import register_organization_tools
from forem_bridge.tools.reactions import register_reaction_tools
from forem_bridge.tools.reading_list import register_reading_list_tools
from forem_bridge.tools.tags import register_tag_tools
from forem_bridge.tools.users import register_user_tools

Registrar = Callable[[FastMCP, ForemClient], None]

DEFAULT_GROUPS: List[Registrar] = [
   register_article_tools,
   register_comment_tools,
   register_user_tools,
   register_tag_tools,
   register_organization_tools,
   register_reading_list_tools,
   register_follower_tools,
]

def register_all(mcp: FastMCP, client: ForemClient, *, enable_reactions: bool = False) -> None:
   groups = list(DEFAULT_GROUPS)
   if enable_reactions:
      groups.append(register_reaction_tools)
   for register in groups:
      register(mcp, client)
