# mcmodgetter

mcmodgetter is a small command-line tool that fetches Minecraft mods from
Modrinth. You give it a project ID or a file of IDs, a game version and a mod
loader. For each project it looks up the newest version that matches. It then
downloads that version's primary file into an output directory. If no file is
marked primary, it downloads the first file of that version.

## Installation

```
pip install .
```

## Usage

Download one mod:

```
mcmodgetter -id AANobbMI -mcv 1.21.8
```

Download every mod listed in a file, with one Modrinth project ID or slug per
line:

```
mcmodgetter --readfile mods.txt -mcv 1.21.8 -l fabric
```

The projects in the file are looked up at the same time, and their files are
downloaded at the same time. A failed lookup or download is reported, and the
rest carry on.

Empty the output directory:

```
mcmodgetter clearmods
```

The tool asks `Delete everything in directory <dir>? (y/n)`. It removes
anything only if you answer `y`.

### Options

| Option              | Meaning                                                       |
|---------------------|---------------------------------------------------------------|
| `-id <ID>`          | Download a single project by its Modrinth ID or slug          |
| `--readfile <FILE>` | Download every project listed in `FILE`, one per line         |
| `-mcv <VERSIONS>`   | Minecraft version(s), comma separated, e.g. `1.21.9,1.21.10`  |
| `-l <LOADER>`       | `fabric` (default), `neoforge` or `forge`                     |
| `-o <DIR>`          | Output directory (default: `mods`, created if missing)        |
| `clearmods`         | Remove everything in the output directory                     |

Every mode except `clearmods` requires `-mcv`. If several mode options are
given, the last one wins. The tool prints a message for any argument it does
not recognise and then ignores it.

The tool exits with status 1 in these cases:

- the arguments are incomplete or invalid, for example no mode, no version, or an unknown loader;
- running the chosen mode fails, for example the ID file cannot be read.

## Library use

- `mcmodgetter.arguments.Config.from_args` parses an argument list. It returns a `Config`, or raises `ConfigError` if the arguments are invalid.
- `mcmodgetter.modrinth` provides async helpers that take an `httpx.AsyncClient`:
  - `get_project`, `get_projects_from_list`, `get_version`, `get_top_version`, `get_file_direct` and `download_file`;
  - the data classes `Project`, `Version`, `ModrinthFile` and `VersionQuery`.
- `mcmodgetter.core` provides these helpers:
  - `create_client`, which returns a client that sends the tool's user agent;
  - `get_out_dir`, `clear_dir` and `lines_from_file`;
  - `modrinth_download_from_id` and `modrinth_download_from_id_list`, which do the downloading.
- `mcmodgetter.cli.main` is the command's entry point.

For example:

```python
import asyncio
from pathlib import Path

from mcmodgetter.core import create_client
from mcmodgetter.modrinth import VersionQuery, download_file, get_file_direct


async def fetch():
    query = VersionQuery.build_query("1.21.8", "fabric")
    async with create_client() as client:
        file = await get_file_direct(client, "AANobbMI", query)
        if file is not None:
            await download_file(client, file, Path("mods"))


asyncio.run(fetch())
```

## What it does not do

The tool has these limits:

- It does not resolve or download a mod's dependencies.
- It does not search Modrinth by name.
- It does not check whether a file is already present. A download overwrites a file of the same name.
- It keeps no record of what it has installed.

## Running the tests

```
pip install .[test]
pytest
```