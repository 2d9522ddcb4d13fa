"""Domain exceptions. Each carries the HTTP status and message used at the request boundary."""

from typing import Any, Dict, Optional


class BlogError(Exception):
    status_code = 500
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)

    def payload(self) -> Dict[str, Any]:
        return {"message": self.message}


class InvalidWord(BlogError):
    status_code = 400

    def __init__(self, reason):
        self.reason = reason
        super().__init__(reason.message)

    def payload(self) -> Dict[str, Any]:
        return {"message": self.message, "reason": self.reason.value}


class InvalidPostInput(BlogError):
    status_code = 400
    default_message = "Title and content are required"


class Unauthenticated(BlogError):
    status_code = 401
    default_message = "Authentication failed"


class Forbidden(BlogError):
    status_code = 403
    default_message = "You can only modify your own posts"


class BlogNotFound(BlogError):
    status_code = 404
    default_message = "Blog not found"


class ConfigurationError(BlogError):
    status_code = 500
    default_message = "Server is not configured"


class GenerationProviderError(BlogError):
    """Completion provider answered with a non-success status (or not at all)."""

    status_code = 500

    def __init__(self, status: Optional[int], body: str):
        self.status = status
        self.body = body
        super().__init__("Failed to generate blog")

    def payload(self) -> Dict[str, Any]:
        return {"message": self.message, "status": self.status, "body": self.body}


class GenerationProviderMalformedResponse(BlogError):
    status_code = 500
    default_message = "Invalid response from completion provider"


class GenerationTimeout(BlogError):
    status_code = 500
    default_message = "Completion provider timed out"


class PersistenceError(BlogError):
    status_code = 500
    default_message = "Failed to save blog"

    def __init__(self, message: Optional[str] = None, error: Optional[str] = None,
                 details: Optional[str] = None, hint: Optional[str] = None):
        super().__init__(message)
        self.error = error
        self.details = details
        self.hint = hint

    def payload(self) -> Dict[str, Any]:
        return {
            "message": self.message,
            "error": self.error,
            "details": self.details,
            "hint": self.hint,
        }


class SlugConflict(Exception):
    """Insert lost a race for a slug; the caller picks another one and retries."""

    def __init__(self, slug: str):
        self.slug = slug
        super().__init__(slug)
