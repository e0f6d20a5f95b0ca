"""Tests for glob resolution and concatenation helpers."""

import pytest

import concat_utils.files as files_module
from concat_utils import GlobError, concat_files, glob_text_files


@pytest.mark.asyncio
async def test_glob_text_files_expands_braces(tmp_path):
    (tmp_path / "a.txt").write_text("a")
    (tmp_path / "b.md").write_text("b")
    (tmp_path / "c.css").write_text("c")

    matched = await glob_text_files(str(tmp_path / "*.{txt,md}"))

    assert sorted(matched) == [str(tmp_path / "a.txt"), str(tmp_path / "b.md")]


@pytest.mark.asyncio
async def test_glob_text_files_skips_directories(tmp_path):
    (tmp_path / "dir.txt").mkdir()
    (tmp_path / "file.txt").write_text("x")

    matched = await glob_text_files(str(tmp_path / "*.txt"))

    assert matched == [str(tmp_path / "file.txt")]


@pytest.mark.asyncio
async def test_glob_text_files_globstar(tmp_path):
    nested = tmp_path / "one" / "two"
    nested.mkdir(parents=True)
    (nested / "deep.txt").write_text("deep")

    matched = await glob_text_files(str(tmp_path / "**" / "*.txt"))

    assert matched == [str(nested / "deep.txt")]


@pytest.mark.asyncio
async def test_glob_text_files_wraps_resolver_errors(monkeypatch):
    def boom(pattern, flags=0):
        raise PermissionError("denied")

    monkeypatch.setattr(files_module.glob, "glob", boom)

    with pytest.raises(GlobError) as excinfo:
        await glob_text_files("/secret/*.txt")

    assert excinfo.value.pattern == "/secret/*.txt"
    assert isinstance(excinfo.value.__cause__, PermissionError)


@pytest.mark.asyncio
async def test_concat_files_joins_in_order(tmp_path):
    first = tmp_path / "1.txt"
    second = tmp_path / "2.txt"
    first.write_text("one")
    second.write_text("two\n")

    assert await concat_files([second, first]) == b"two\n\none"
    assert await concat_files([first, second], separator="") == b"onetwo\n"


@pytest.mark.asyncio
async def test_concat_files_empty_list():
    assert await concat_files([]) == b""


@pytest.mark.asyncio
async def test_concat_files_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        await concat_files([tmp_path / "missing.txt"])
