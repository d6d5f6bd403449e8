"""
utils/errors.py

Exceptions shared by the gateway, the showcase routes and the renderer.
Every error carries a user-facing message and the HTTP status it maps to.
"""

from typing import Any, Dict


class ShowcaseError(Exception):
    """Base exception for the showcase service."""

    status_code = 500

    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message}


class ShowcaseValidationError(ShowcaseError):
    """Input rejected before any work is done."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class PromptRequiredError(ShowcaseValidationError):
    def __init__(self, message: str = "Prompt is required"):
        super().__init__(message)


class UpstreamError(ShowcaseError):
    """The hosted completion service failed or returned nothing usable."""

    def __init__(self, message: str = "Failed to generate code"):
        super().__init__(message, code="UPSTREAM_ERROR")


class SessionRequiredError(ShowcaseError):
    status_code = 401

    def __init__(self, message: str = "You must be logged in to upload a project."):
        super().__init__(message, code="SESSION_REQUIRED")


class ProjectNotFoundError(ShowcaseError):
    status_code = 404

    def __init__(self, project_id: str):
        super().__init__(f"Project not found: {project_id}", code="PROJECT_NOT_FOUND")
        self.project_id = project_id
