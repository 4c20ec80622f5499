"""Repository and pull request labels."""

from dataclasses import dataclass
from typing import Any
from urllib.parse import quote

from github_client_core.client import GitHubClient
from github_client_core.options import Options
from github_client_core.pagination import Paginator


@dataclass(frozen=True)
class Label:
    url: str
    name: str
    color: str
    id: int | None = None
    description: str | None = None
    default: bool = False

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> "Label":
        return cls(
            url=data["url"],
            name=data["name"],
            color=data["color"],
            id=data.get("id"),
            description=data.get("description"),
            default=data.get("default", False),
        )

    @classmethod
    def list_from_json(cls, data: list[dict[str, Any]]) -> list["Label"]:
        if not isinstance(data, list):
            raise TypeError(f"expected a list of labels, got {type(data).__name__}")
        return [cls.from_json(item) for item in data]


@dataclass(frozen=True)
class LabelOptions:
    name: str
    color: str
    description: str | None = None

    def to_options(self) -> Options:
        return Options(name=self.name, color=self.color, description=self.description)


class RepoLabels:
    """Labels defined on a repository."""

    def __init__(self, client: GitHubClient, owner: str, repo: str):
        self.client = client
        self.path = f"/repos/{owner}/{repo}/labels"

    def iter(self, options: Options | None = None) -> Paginator[Label]:
        return self.client.paginate(self.path, params=options.query() if options else None, model=Label)

    async def list(self, options: Options | None = None) -> list[Label]:
        return await self.iter(options).collect()

    async def get(self, name: str) -> Label:
        return await self.client.get(f"{self.path}/{quote(name, safe='')}", model=Label)

    async def create(self, options: LabelOptions) -> Label:
        return await self.client.post(self.path, json=options.to_options().body(), model=Label)

    async def update(self, name: str, options: LabelOptions) -> Label:
        body = options.to_options().set("new_name", options.name).body()
        del body["name"]
        return await self.client.patch(f"{self.path}/{quote(name, safe='')}", json=body, model=Label)

    async def delete(self, name: str) -> None:
        await self.client.delete(f"{self.path}/{quote(name, safe='')}")


class PullLabels:
    """Labels applied to a single pull request."""

    def __init__(self, client: GitHubClient, owner: str, repo: str, number: int):
        self.client = client
        self.path = f"/repos/{owner}/{repo}/pulls/{number}/labels"

    def iter(self) -> Paginator[Label]:
        return self.client.paginate(self.path, model=Label)

    async def add(self, labels: list[str]) -> list[Label]:
        """Add labels, returning every label now on the pull request."""
        return await self.client.post(self.path, json=list(labels), model=Label.list_from_json)

    async def set(self, labels: list[str]) -> list[Label]:
        """Replace all labels."""
        return await self.client.put(self.path, json=list(labels), model=Label.list_from_json)

    async def remove(self, name: str) -> None:
        await self.client.delete(f"{self.path}/{quote(name, safe='')}")

    async def clear(self) -> None:
        await self.client.delete(self.path)
