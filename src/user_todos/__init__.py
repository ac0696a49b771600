"""
User Todos Backend package.

Exposes the FastAPI app instance for convenience imports
(`from user_todos import app`).
"""

from .main import app  # noqa: F401
