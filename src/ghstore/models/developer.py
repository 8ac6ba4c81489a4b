"""Developer profile models."""

from pydantic import BaseModel


class DeveloperProfile(BaseModel):
    """Public profile of a GitHub user."""

    id: int
    login: str
    name: str | None = None
    bio: str | None = None
    avatar_url: str | None = None
    html_url: str | None = None
    followers: int = 0
    following: int = 0
    public_repos: int = 0
    location: str | None = None
    company: str | None = None
    blog: str | None = None
    twitter_username: str | None = None
