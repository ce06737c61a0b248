"""Access to the Modrinth API: projects, versions and file downloads."""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import httpx

MODRINTH_URL = "https://api.modrinth.com"


class VersionError(Exception):
    """Raised when no usable version of a project could be found."""


@dataclass(frozen=True)
class Project:
    """A Modrinth project."""

    id: str
    title: str
    description: str

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Project:
        return cls(id=data["id"], title=data["title"], description=data["description"])


@dataclass(frozen=True)
class ModrinthFile:
    """A downloadable file belonging to a version."""

    url: str
    filename: str
    primary: bool = True

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> ModrinthFile:
        return cls(url=data["url"], filename=data["filename"], primary=bool(data["primary"]))


@dataclass(frozen=True)
class Version:
    """A released version of a project."""

    id: str
    project_id: str
    name: str
    version_number: str
    files: list[ModrinthFile] = field(default_factory=list)

    @classmethod
    def from_json(cls, data: dict[str, Any]) -> Version:
        return cls(
            id=data["id"],
            project_id=data["project_id"],
            name=data["name"],
            version_number=data["version_number"],
            files=[ModrinthFile.from_json(f) for f in data["files"]],
        )


def _param_array(user_params: str) -> str:
    return "[" + ",".join(f'"{p}"' for p in user_params.split(",")) + "]"


@dataclass(frozen=True)
class VersionQuery:
    """Query parameters filtering versions by game version and loader."""

    game_versions: str
    loaders: str

    @classmethod
    def build_query(cls, user_mcvs: str, user_loader: str) -> VersionQuery:
        """Build a query from comma-separated game versions and loaders."""
        return cls(game_versions=_param_array(user_mcvs), loaders=_param_array(user_loader))

    def params(self) -> dict[str, str]:
        return {"game_versions": self.game_versions, "loaders": self.loaders}


async def get_project(client: httpx.AsyncClient, project_id: str) -> Project:
    response = await client.get(f"{MODRINTH_URL}/v2/project/{project_id}")
    response.raise_for_status()
    return Project.from_json(response.json())


async def get_projects_from_list(
    client: httpx.AsyncClient, ids: Iterable[str]
) -> list[Project | Exception]:
    """Fetch all projects concurrently; failures appear as exceptions in place."""
    results = await asyncio.gather(
        *(get_project(client, project_id) for project_id in ids),
        return_exceptions=True,
    )
    return list(results)


async def get_version(
    client: httpx.AsyncClient, project_id: str, query: VersionQuery
) -> list[Version]:
    response = await client.get(
        f"{MODRINTH_URL}/v2/project/{project_id}/version", params=query.params()
    )
    response.raise_for_status()
    return [Version.from_json(v) for v in response.json()]


async def get_top_version(
    client: httpx.AsyncClient, project_id: str, query: VersionQuery
) -> Version:
    """Return the first version matching the query, or raise VersionError."""
    try:
        versions = await get_version(client, project_id, query)
    except (httpx.HTTPError, ValueError, KeyError, TypeError) as err:
        raise VersionError(f"Couldn't get versions: {err}") from err
    if not versions:
        print(f"No suitable version for id {project_id}", file=sys.stderr)
        raise VersionError("No version available")
    return versions[0]


def search_for_primary_file(files: list[ModrinthFile]) -> int | None:
    """Index of the first primary file, 0 if none is primary, None if there are no files."""
    if not files:
        return None
    return next((i for i, f in enumerate(files) if f.primary), 0)


def file_from_version(version: Version) -> ModrinthFile | None:
    index = search_for_primary_file(version.files)
    return None if index is None else version.files[index]


async def get_file_direct(
    client: httpx.AsyncClient, project_id: str, query: VersionQuery
) -> ModrinthFile | None:
    """Find the file to download for a project, or None if there is none."""
    try:
        version = await get_top_version(client, project_id, query)
    except VersionError as err:
        print(f"({project_id}) Failed to find suitable version: {err}")
        return None
    print(f"({project_id}) Found suitable version: {version.name} [{version.version_number}]")
    return file_from_version(version)


async def download_file(
    client: httpx.AsyncClient, file: ModrinthFile, out_dir: str | Path
) -> Path:
    """Download a file into out_dir and return the path written."""
    response = await client.get(file.url)
    response.raise_for_status()
    target = Path(out_dir) / file.filename
    target.write_bytes(response.content)
    print(f"Successfully downloaded {file.filename}")
    return target


def collect_versions(results: Iterable[Version | Exception]) -> list[Version]:
    """Keep the versions, reporting every error on stderr."""
    versions = []
    for result in results:
        if isinstance(result, Exception):
            print(f"Could not retrieve version: {result}", file=sys.stderr)
        else:
            versions.append(result)
    return versions