"""Blog publishing workflow: slug, markdown rendering and insert with collision retry."""

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

from sqlalchemy.orm import Session

from wordblog.config import Settings
from wordblog.errors import Forbidden, InvalidPostInput, PersistenceError, SlugConflict
from wordblog.models.blog import Blog
from wordblog.services.ai_client import GenerationClient
from wordblog.services.blog_pipeline import extract_title, generated_tags, normalize_manual_tags
from wordblog.services.blog_repository import BlogRepository
from wordblog.services.ownership import Identity, Owned, can_modify, owner_of
from wordblog.utils.markdown_render import render_markdown
from wordblog.utils.slug import base_slug, unique_slug

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GeneratedDraft:
    title: str
    content: str
    tags: List[str]


def draft_from_generation(word: str, text: str) -> GeneratedDraft:
    return GeneratedDraft(title=extract_title(text, word), content=text, tags=generated_tags(word))


class BlogService:
    def __init__(self, db: Session, settings: Settings):
        self.db = db
        self.settings = settings
        self.repo = BlogRepository(db)

    def generate_post(self, word: str, identity: Identity, generator: GenerationClient) -> Blog:
        # Provider call first, so a failed generation never touches the database.
        draft = draft_from_generation(word, generator.generate(word))
        return self.publish(draft.title, draft.content, draft.tags, identity)

    def create_manual_post(
        self,
        title: Optional[str],
        content: Optional[str],
        tags: Union[str, Iterable[str], None],
        identity: Identity,
    ) -> Blog:
        title = (title or "").strip()
        if not title or not (content or "").strip():
            raise InvalidPostInput()
        return self.publish(title, content, normalize_manual_tags(tags), identity)

    def publish(
        self,
        title: str,
        content_md: str,
        tags: List[str],
        identity: Identity,
    ) -> Blog:
        self.repo.ensure_user(identity)
        owner = Owned(identity.user_id)

        # Rendered once here so stored HTML always matches stored markdown.
        content_html = render_markdown(content_md)
        base = base_slug(title)
        attempts = max(1, int(self.settings.SLUG_MAX_ATTEMPTS))

        for attempt in range(1, attempts + 1):
            slug = unique_slug(base, self.repo.list_slugs_with_prefix(base))
            try:
                blog = self.repo.insert(
                    title=title,
                    slug=slug,
                    content_md=content_md,
                    content_html=content_html,
                    tags=tags,
                    owner=owner,
                )
            except SlugConflict:
                logger.info("[slug] '%s' was claimed concurrently (attempt %s/%s)", slug, attempt, attempts)
                continue
            logger.info("[blog] created id=%s slug=%s tags=%s", blog.id, blog.slug, blog.tags)
            return blog

        raise PersistenceError(
            error=f"Could not claim a unique slug for '{base}'",
            details=f"{attempts} attempts",
            hint="Retry the request",
        )

    def list_recent(self, limit: Optional[int] = None) -> List[Blog]:
        limit = limit or self.settings.RECENT_POSTS_LIMIT
        limit = max(1, min(int(limit), self.settings.MAX_RECENT_POSTS_LIMIT))
        return self.repo.list_recent(limit)

    def get_by_slug(self, slug: str) -> Blog:
        return self.repo.get_by_slug(slug)

    def delete_post(self, blog_id: str, identity: Identity) -> None:
        blog = self.repo.get_by_id(blog_id)
        if not can_modify(owner_of(blog.user_id), identity):
            raise Forbidden("You can only delete your own posts")
        self.repo.delete_by_id(blog_id)
        logger.info("[blog] deleted id=%s by user=%s", blog_id, identity.user_id)
