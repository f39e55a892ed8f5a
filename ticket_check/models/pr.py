"""Pull request snapshot for a single run."""

from pydantic import BaseModel, ConfigDict, Field


class PullRequestContext(BaseModel):
    """Pull request state as delivered by the event (read-only)."""

    model_config = ConfigDict(frozen=True)

    owner: str = Field(description="Repository owner login")
    repo: str = Field(description="Repository name")
    number: int
    title: str = ""
    body: str = ""
    branch: str = Field(default="", description="Source (head) branch name")
    author: str = Field(default="", description="PR author login")
    author_kind: str = Field(default="User", description="Account type: User, Bot, Organization")

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"
