"""Script template parameter models."""

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ScriptParams:
    """Named values substituted into a script template."""

    image: str
    extra: dict[str, Any] = field(default_factory=dict)

    def as_context(self) -> dict[str, Any]:
        """Return the template context.

        ``image`` always wins over an ``extra`` entry of the same name.
        """
        return {**self.extra, "image": self.image}


def image_reference(repo: str, tag: str) -> str:
    """Combine an image repository and tag into ``repo:tag``."""
    if not tag:
        return repo
    return f"{repo}:{tag}"
