from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Mapping, Optional, Union

from pydantic import AnyHttpUrl, BaseModel, Field

HttpMethod = Literal["GET", "POST", "PUT"]
QueryValue = Union[str, int, float, bool, None]

@dataclass(frozen=True, slots=True)
class RequestDescriptor:
   """One logical call against the API. Built per call, never mutated."""
   method: HttpMethod
   path: str
   query: Optional[Mapping[str, QueryValue]] = None
   body: Optional[Dict[str, Any]] = None
   authenticated: bool = True

   @property
   def sends_body(self) -> bool:
      return self.method != "GET" and self.body is not None

@dataclass(frozen=True, slots=True)
class RateLimitInfo:
   limit: Optional[int] = None
   remaining: Optional[int] = None
   reset: Optional[int] = None

   def as_dict(self) -> Dict[str, Optional[int]]:
      return {"limit": self.limit, "remaining": self.remaining, "reset": self.reset}

class ArticleFields(BaseModel):
   """Writable article attributes shared by create and update."""
   body_markdown: Optional[str] = None
   published: Optional[bool] = None
   tags: Optional[List[str]] = Field(default=None, max_length=4)
   series: Optional[str] = None
   canonical_url: Optional[AnyHttpUrl] = None
   description: Optional[str] = None
   main_image: Optional[AnyHttpUrl] = None
   organization_id: Optional[int] = None

class ArticleDraft(ArticleFields):
   title: str

   def payload(self) -> Dict[str, Any]:
      # absent fields are dropped, the API applies its own defaults
      return {"article": self.model_dump(mode="json", exclude_none=True)}

class ArticleChanges(ArticleFields):
   title: Optional[str] = None

   def payload(self) -> Dict[str, Any]:
      # only fields the caller set; an explicit series=None detaches the series
      return {"article": self.model_dump(mode="json", exclude_unset=True)}
