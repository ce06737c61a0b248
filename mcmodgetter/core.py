"""Download orchestration, output directory handling and id-list reading."""

from __future__ import annotations

import asyncio
import shutil
from collections.abc import Iterable
from pathlib import Path

import httpx

from mcmodgetter.arguments import Config
from mcmodgetter.modrinth import VersionQuery, download_file, get_file_direct

DEFAULT_OUT_DIR = "mods"
APP_USER_AGENT = "mcmodgetter/0.1.0"


def create_client() -> httpx.AsyncClient:
    """Create the HTTP client used for every request, with the application's user agent."""
    return httpx.AsyncClient(headers={"User-Agent": APP_USER_AGENT})


def get_out_dir(conf_dir: str | Path | None) -> Path:
    """Return the output directory, creating it if needed; defaults to 'mods'."""
    path = Path(conf_dir) if conf_dir is not None else Path(DEFAULT_OUT_DIR)
    path.mkdir(parents=True, exist_ok=True)
    return path


def _remove_entry(path: Path) -> None:
    if path.is_dir():
        shutil.rmtree(path)
    elif path.is_file():
        path.unlink()
    print(f"Removed entry {path}")


def clear_dir(out_dir: str | Path) -> None:
    """Remove every entry of out_dir, reporting entries that cannot be removed."""
    out_dir = Path(out_dir)
    print(f"Clearing folder {out_dir}...")
    for entry in out_dir.iterdir():
        try:
            _remove_entry(entry)
        except OSError as err:
            print(f"Could not remove entry {entry} because {err}")


def _query_for(conf: Config) -> VersionQuery:
    return VersionQuery.build_query(conf.mcvs, str(conf.loader))


async def modrinth_download_from_id(
    conf: Config, client: httpx.AsyncClient, project_id: str, out_dir: str | Path
) -> None:
    """Download the newest matching file of one project into out_dir."""
    file = await get_file_direct(client, project_id, _query_for(conf))
    if file is None:
        print(f"No file available for id {project_id}")
        return
    await download_file(client, file, out_dir)


async def modrinth_download_from_id_list(
    conf: Config, client: httpx.AsyncClient, ids: Iterable[str], out_dir: str | Path
) -> None:
    """Download the newest matching file of every project concurrently, reporting failures."""
    query = _query_for(conf)
    lookups = []
    for project_id in ids:
        print(f"Getting ID '{project_id}'...")
        lookups.append(get_file_direct(client, project_id, query))
    files = await asyncio.gather(*lookups)

    results = await asyncio.gather(
        *(download_file(client, f, out_dir) for f in files if f is not None),
        return_exceptions=True,
    )
    for result in results:
        if isinstance(result, BaseException):
            print(f"Download error: {result}")


def lines_from_file(filename: str | Path) -> list[str]:
    """Read the lines of a file, skipping any line that is not valid UTF-8."""
    lines = []
    with open(filename, "rb") as handle:
        for raw in handle:
            if raw.endswith(b"\n"):
                raw = raw[:-1]
                if raw.endswith(b"\r"):
                    raw = raw[:-1]
            try:
                lines.append(raw.decode("utf-8"))
            except UnicodeDecodeError:
                continue
    return lines