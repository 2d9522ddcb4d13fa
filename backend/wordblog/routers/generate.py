"""Generation API router. Validates the word, checks credentials and delegates to the blog service."""

from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from wordblog.config import Settings, get_settings
from wordblog.database import get_db
from wordblog.middleware.auth_middleware import authenticate, bearer_token, get_auth_gate
from wordblog.schemas.blog import BlogEnvelope, GenerateRequest, GeneratedContentOut, WordRulesOut
from wordblog.services.ai_client import GenerationClient, get_generation_client
from wordblog.services.auth_service import AuthGate
from wordblog.services.blog_service import BlogService, draft_from_generation
from wordblog.utils.word_validator import validate_word, word_rules

router = APIRouter(prefix="/api", tags=["generate"])


@router.post("/generate", response_model=BlogEnvelope)
def generate_blog(
    req: GenerateRequest,
    token: Optional[str] = Depends(bearer_token),
    gate: AuthGate = Depends(get_auth_gate),
    generator: GenerationClient = Depends(get_generation_client),
    db: Session = Depends(get_db),
    settings: Settings = Depends(get_settings),
):
    # Word rules are checked before credentials so bad input never reaches the identity service.
    word = validate_word(req.word)
    identity = authenticate(gate, token)
    blog = BlogService(db, settings).generate_post(word, identity, generator)
    return {"blog": blog}


@router.post("/generate-content", response_model=GeneratedContentOut)
def generate_content(
    req: GenerateRequest,
    generator: GenerationClient = Depends(get_generation_client),
):
    """Draft preview for the editor. Nothing is stored."""
    word = validate_word(req.word)
    draft = draft_from_generation(word, generator.generate(word))
    return {"title": draft.title, "content": draft.content, "tags": draft.tags}


@router.get("/word-rules", response_model=WordRulesOut)
def get_word_rules():
    return word_rules()
