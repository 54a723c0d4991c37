"""Data models for GitHub issues and the tasks built from them."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict, Field


class IssueCoordinates(BaseModel):
    """Where an issue lives: owner/repo plus its number."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(min_length=1)
    repo: str = Field(min_length=1)
    issue_number: int = Field(ge=1)

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"

    def __str__(self) -> str:
        return f"{self.full_name}#{self.issue_number}"


class IssueDetails(BaseModel):
    """The parts of a GitHub issue that make up a task."""

    model_config = ConfigDict(frozen=True)

    title: str
    body: str = ""
    url: str

    @classmethod
    def from_api(cls, data: Dict[str, Any]) -> "IssueDetails":
        """Build from a GitHub REST API issue object."""
        return cls(
            title=data["title"],
            body=data.get("body") or "",
            url=data["html_url"],
        )


class Task(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    source: str


class TaskPayload(BaseModel):
    """Result of the get_issue_task tool."""

    model_config = ConfigDict(frozen=True)

    task: Task

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON serialization."""
        return self.model_dump()
