"""Exception types raised by the configuration model and storage layer.

Convention:
- ``ValidationError`` rejects a page operation that would break a model
  invariant. The model is left unchanged and the message is safe to show.
- ``NotFoundError`` is raised for page ids that are not in the model.
- ``ConfigImportError`` wraps anything that goes wrong while reading an
  imported config file.
"""

from __future__ import annotations


class ValidationError(ValueError):
    """Raised when adding or deleting a page would violate the page rules."""


class NotFoundError(KeyError):
    """Raised when a page id does not exist."""

    def __str__(self) -> str:
        return str(self.args[0]) if self.args else "Not found"


class ConfigImportError(ValueError):
    """Raised when an imported configuration cannot be parsed or merged."""
