"""Service layer package."""

from wordblog.services import (
    ai_client,
    auth_service,
    blog_pipeline,
    blog_prompts,
    blog_repository,
    blog_service,
    ownership,
)
