"""Declaration of the root package taskboard."""

from taskboard.app import app
from taskboard.server import run

__all__ = ["app", "main"]


def main() -> None:
    """Run the application server using uvicorn."""
    run()
