"""Blog API router: manual creation, public reads and owner-only delete."""

from typing import Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from wordblog.config import Settings, get_settings
from wordblog.database import get_db
from wordblog.middleware.auth_middleware import get_current_identity
from wordblog.schemas.blog import BlogEnvelope, BlogListOut, ManualCreateRequest, MessageOut
from wordblog.services.blog_service import BlogService
from wordblog.services.ownership import Identity

router = APIRouter(prefix="/api", tags=["blogs"])


@router.post("/create-blog", response_model=BlogEnvelope)
def create_blog(
    req: ManualCreateRequest,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    identity: Identity = Depends(get_current_identity),
):
    blog = BlogService(db, settings).create_manual_post(req.title, req.content, req.tags, identity)
    return {"blog": blog}


@router.get("/blogs", response_model=BlogListOut)
def list_blogs(
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    return {"blogs": BlogService(db, settings).list_recent(limit)}


@router.get("/blogs/{slug}", response_model=BlogEnvelope)
def get_blog(slug: str, db: Session = Depends(get_db), settings: Settings = Depends(get_settings)):
    return {"blog": BlogService(db, settings).get_by_slug(slug)}


@router.delete("/blogs/{blog_id}", response_model=MessageOut)
def delete_blog(
    blog_id: str,
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
    identity: Identity = Depends(get_current_identity),
):
    BlogService(db, settings).delete_post(blog_id, identity)
    return {"message": "Blog deleted successfully"}
