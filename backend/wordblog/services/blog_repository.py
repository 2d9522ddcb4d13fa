"""Data access for the blogs table."""

import logging
from typing import List, Optional, Set

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from wordblog.errors import BlogNotFound, PersistenceError, SlugConflict
from wordblog.models.blog import Blog
from wordblog.models.user import User
from wordblog.services.ownership import Identity, Owner, owner_column

logger = logging.getLogger(__name__)


def _persistence_error(exc: SQLAlchemyError, hint: Optional[str] = None) -> PersistenceError:
    orig = getattr(exc, "orig", None)
    return PersistenceError(
        error=str(orig or exc),
        details=type(orig or exc).__name__,
        hint=hint,
    )


class BlogRepository:
    def __init__(self, db: Session):
        self.db = db

    def insert(
        self,
        *,
        title: str,
        slug: str,
        content_md: str,
        content_html: str,
        tags: List[str],
        owner: Owner,
    ) -> Blog:
        blog = Blog(
            title=title,
            slug=slug,
            content_md=content_md,
            content_html=content_html,
            tags=list(tags),
            user_id=owner_column(owner),
        )
        self.db.add(blog)
        try:
            self.db.commit()
        except IntegrityError as exc:
            self.db.rollback()
            if self.slug_exists(slug):
                raise SlugConflict(slug) from exc
            logger.warning("[blog] insert rejected by a constraint: %s", exc.orig)
            raise _persistence_error(exc, hint="Check that the owner exists in the users table") from exc
        except SQLAlchemyError as exc:
            self.db.rollback()
            logger.warning("[blog] insert failed: %s", exc)
            raise _persistence_error(exc, hint="Check that the blogs table schema is up to date") from exc
        self.db.refresh(blog)
        return blog

    def list_recent(self, limit: int) -> List[Blog]:
        return (
            self.db.query(Blog)
            .order_by(Blog.created_at.desc(), Blog.id.desc())
            .limit(limit)
            .all()
        )

    def get_by_slug(self, slug: str) -> Blog:
        blog = self.db.query(Blog).filter(Blog.slug == slug).first()
        if not blog:
            raise BlogNotFound()
        return blog

    def get_by_id(self, blog_id: str) -> Blog:
        blog = self.db.query(Blog).filter(Blog.id == blog_id).first()
        if not blog:
            raise BlogNotFound()
        return blog

    def delete_by_id(self, blog_id: str) -> None:
        """Delete a post. Ownership must already have been checked by the caller."""
        blog = self.get_by_id(blog_id)
        try:
            self.db.delete(blog)
            self.db.commit()
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise _persistence_error(exc) from exc

    def slug_exists(self, slug: str) -> bool:
        return self.db.query(Blog.id).filter(Blog.slug == slug).first() is not None

    def list_slugs_with_prefix(self, prefix: str) -> Set[str]:
        # Slugs only contain [a-z0-9-], so LIKE wildcards cannot appear in the prefix.
        rows = self.db.query(Blog.slug).filter(Blog.slug.like(f"{prefix}%")).all()
        return {row[0] for row in rows}

    def ensure_user(self, identity: Identity) -> User:
        user = self.db.query(User).filter(User.id == identity.user_id).first()
        if user and (not identity.email or user.email == identity.email):
            return user
        if user is None:
            user = User(id=identity.user_id, email=identity.email)
            self.db.add(user)
        else:
            user.email = identity.email
        try:
            self.db.commit()
        except IntegrityError:
            # Another request mirrored the same identity first.
            self.db.rollback()
            user = self.db.query(User).filter(User.id == identity.user_id).first()
            if user is None:
                raise PersistenceError(error="Could not register user", details=identity.user_id)
            return user
        except SQLAlchemyError as exc:
            self.db.rollback()
            raise _persistence_error(exc) from exc
        self.db.refresh(user)
        return user
