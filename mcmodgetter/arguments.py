"""Command-line argument parsing into a run configuration."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Union


class ConfigError(Exception):
    """Raised when the command-line arguments do not form a valid configuration."""


class Loader(Enum):
    """Mod loaders that versions can be filtered by."""

    FABRIC = "fabric"
    NEOFORGE = "neoforge"
    FORGE = "forge"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class SingleId:
    """Download a single project given by its id."""

    project_id: str


@dataclass(frozen=True)
class IdFromFile:
    """Download every project whose id is listed, one per line, in a file."""

    path: Path


@dataclass(frozen=True)
class ClearMods:
    """Remove everything from the output directory."""


AppMode = Union[SingleId, IdFromFile, ClearMods]


def _next_value(args: Iterator[str], message: str) -> str:
    try:
        return next(args)
    except StopIteration:
        raise ConfigError(message) from None


def _parse_loader(value: str) -> Loader:
    try:
        return Loader(value)
    except ValueError:
        raise ConfigError("Invalid loader") from None


@dataclass(frozen=True)
class Config:
    """What to do, for which game version and loader, and where to put the files."""

    mode: AppMode
    mcvs: str
    loader: Loader = Loader.FABRIC
    out_dir: Path | None = None

    @classmethod
    def from_args(cls, args: Iterable[str]) -> Config:
        """Build a configuration from the arguments that follow the program name."""
        mode: AppMode | None = None
        mcvs: str | None = None
        loader = Loader.FABRIC
        out_dir: Path | None = None

        remaining = iter(args)
        for arg in remaining:
            if arg == "-id":
                mode = SingleId(_next_value(remaining, "Invalid ID"))
            elif arg == "--readfile":
                mode = IdFromFile(Path(_next_value(remaining, "Invalid filename")))
            elif arg == "-mcv":
                mcvs = _next_value(remaining, "Invalid mcv")
            elif arg == "-l":
                loader = _parse_loader(_next_value(remaining, "Invalid loader"))
            elif arg == "-o":
                out_dir = Path(_next_value(remaining, "Invalid output directory"))
            elif arg == "clearmods":
                mode = ClearMods()
            else:
                print(f"arg '{arg}' not recognized")

        if mode is None:
            raise ConfigError("No ID specified")
        if isinstance(mode, ClearMods):
            mcvs = ""
        elif mcvs is None:
            raise ConfigError("No mc version specified")
        return cls(mode=mode, mcvs=mcvs, loader=loader, out_dir=out_dir)