"""
PathKey: source file identifier used as a validation-result map key.
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class PathKey:
    """Opaque path value; equality and hash are based on the text only."""

    path: str

    @property
    def name(self) -> str:
        """Final path component."""
        return self.path.replace("\\", "/").rstrip("/").rsplit("/", 1)[-1]

    def __str__(self) -> str:
        return self.path
