from sqlalchemy import inspect

from wordblog.config import Settings
from wordblog.models.blog import Blog
from wordblog.models.user import User


def test_settings_defaults():
    settings = Settings(SITE_URL=" https://wordblog.example ", SUPABASE_URL="https://project.supabase.co/")
    assert settings.SLUG_MAX_ATTEMPTS == 3
    assert settings.RECENT_POSTS_LIMIT == 6
    assert settings.AUTH_MODE == "jwt"
    assert settings.openrouter_headers() == {"HTTP-Referer": "https://wordblog.example", "X-Title": "Word Blog"}
    assert settings.supabase_user_url() == "https://project.supabase.co/auth/v1/user"
    assert "DEBUG" not in Settings.model_fields


def test_blog_slug_is_indexed_once_by_its_unique_constraint():
    table = Blog.__table__
    assert table.c.slug.unique
    assert {index.name for index in table.indexes} == {"blogs_created_at_idx", "blogs_user_id_idx"}


def test_models_carry_no_orm_relationships():
    assert not inspect(Blog).relationships
    assert not inspect(User).relationships
