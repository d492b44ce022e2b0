"""
Component Update Helper — GitHub session handle.

The pipeline passes a GitHubContext through untouched; only the API
request helper turns it into headers.
"""

from dataclasses import dataclass

from component_updates.core.config import settings


@dataclass(frozen=True)
class GitHubContext:
    token: str = ""

    @classmethod
    def from_settings(cls) -> "GitHubContext":
        return cls(token=settings.github_token)

    def as_headers(self) -> dict[str, str]:
        """Return the auth headers for GitHub REST calls (none when anonymous)."""
        if not self.token:
            return {}
        return {"Authorization": f"Bearer {self.token}"}
