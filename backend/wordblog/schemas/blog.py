"""Pydantic request/response contracts for blog endpoints."""

from pydantic import BaseModel
from typing import Dict, List, Optional, Union
from datetime import datetime


class BlogOut(BaseModel):
    id: str
    title: str
    slug: str
    content_md: str
    content_html: str
    tags: List[str]
    created_at: datetime
    user_id: Optional[str] = None

    model_config = {"from_attributes": True}


class BlogEnvelope(BaseModel):
    blog: BlogOut


class BlogListOut(BaseModel):
    blogs: List[BlogOut]


class GenerateRequest(BaseModel):
    word: Optional[str] = None


class GeneratedContentOut(BaseModel):
    title: str
    content: str
    tags: List[str]


class ManualCreateRequest(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    tags: Optional[Union[str, List[str]]] = None


class WordRulesOut(BaseModel):
    min_length: int
    max_length: int
    pattern: str
    messages: Dict[str, str]


class MessageOut(BaseModel):
    message: str
