"""Command-line entry point."""

from __future__ import annotations

import asyncio
import sys
from collections.abc import Callable, Sequence

from mcmodgetter.arguments import ClearMods, Config, ConfigError, IdFromFile, SingleId
from mcmodgetter.core import (
    clear_dir,
    create_client,
    get_out_dir,
    lines_from_file,
    modrinth_download_from_id,
    modrinth_download_from_id_list,
)


def _ask(input_func: Callable[[], str]) -> str:
    try:
        return input_func()
    except EOFError:
        return ""


async def run(conf: Config, input_func: Callable[[], str] | None = None) -> None:
    """Carry out the configured mode."""
    if input_func is None:
        input_func = input
    print("Starting...")
    async with create_client() as client:
        out_dir = get_out_dir(conf.out_dir)
        mode = conf.mode
        if isinstance(mode, IdFromFile):
            ids = lines_from_file(mode.path)
            await modrinth_download_from_id_list(conf, client, ids, out_dir)
        elif isinstance(mode, SingleId):
            await modrinth_download_from_id(conf, client, mode.project_id, out_dir)
        elif isinstance(mode, ClearMods):
            print(f"Delete everything in directory {out_dir}? (y/n)")
            if _ask(input_func).strip().lower() == "y":
                clear_dir(out_dir)


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the arguments and run; return the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        conf = Config.from_args(args)
    except ConfigError as err:
        print(err, file=sys.stderr)
        return 1
    try:
        asyncio.run(run(conf))
    except Exception as err:
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())