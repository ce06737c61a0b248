from pathlib import Path

import pytest

from mcmodgetter.arguments import (
    ClearMods,
    Config,
    ConfigError,
    IdFromFile,
    Loader,
    SingleId,
)


def test_single_id_with_version_defaults_to_fabric():
    conf = Config.from_args(["-id", "AANobbMI", "-mcv", "1.21.8"])
    assert conf.mode == SingleId("AANobbMI")
    assert conf.mcvs == "1.21.8"
    assert conf.loader is Loader.FABRIC
    assert conf.out_dir is None


def test_readfile_mode_keeps_path():
    conf = Config.from_args(["--readfile", "ids.txt", "-mcv", "1.21.8"])
    assert conf.mode == IdFromFile(Path("ids.txt"))


@pytest.mark.parametrize(
    ("name", "expected"),
    [("fabric", Loader.FABRIC), ("neoforge", Loader.NEOFORGE), ("forge", Loader.FORGE)],
)
def test_loader_names(name, expected):
    conf = Config.from_args(["-id", "x", "-mcv", "1.21.8", "-l", name])
    assert conf.loader is expected
    assert str(conf.loader) == name


def test_output_directory():
    conf = Config.from_args(["-id", "x", "-mcv", "1.21.8", "-o", "some/dir"])
    assert conf.out_dir == Path("some/dir")


def test_clearmods_needs_no_version():
    conf = Config.from_args(["clearmods"])
    assert conf.mode == ClearMods()
    assert conf.mcvs == ""


def test_last_mode_wins():
    conf = Config.from_args(["clearmods", "-id", "abc", "-mcv", "1.20"])
    assert conf.mode == SingleId("abc")


def test_unrecognized_argument_is_reported_and_ignored(capsys):
    conf = Config.from_args(["--bogus", "-id", "abc", "-mcv", "1.20"])
    assert conf.mode == SingleId("abc")
    assert "arg '--bogus' not recognized" in capsys.readouterr().out


@pytest.mark.parametrize(
    ("args", "message"),
    [
        ([], "No ID specified"),
        (["-mcv", "1.21.8"], "No ID specified"),
        (["-id", "abc"], "No mc version specified"),
        (["-id"], "Invalid ID"),
        (["--readfile"], "Invalid filename"),
        (["-id", "abc", "-mcv"], "Invalid mcv"),
        (["-id", "abc", "-l"], "Invalid loader"),
        (["-id", "abc", "-l", "quilt"], "Invalid loader"),
        (["-id", "abc", "-o"], "Invalid output directory"),
    ],
)
def test_errors(args, message):
    with pytest.raises(ConfigError) as info:
        Config.from_args(args)
    assert str(info.value) == message