import os
import sys

import pytest

from emoji_bot.emoji import CatalogIOError, FilenameDecodeError, build_catalog, decode_filename

RAINBOW_FLAG = "\U0001F3F3\uFE0F\u200D\U0001F308"


def touch(directory, name):
    (directory / name).write_text("<svg/>", encoding="utf-8")


class TestDecodeFilename:
    def test_multi_codepoint(self):
        assert decode_filename("1f3f3-fe0f-200d-1f308.svg") == RAINBOW_FLAG

    def test_single(self):
        assert decode_filename("23.svg") == "#"

    @pytest.mark.parametrize(
        "name",
        ["1F600.svg", "1f600.png", "1f600.svg.bak", "1f600-.svg", "1234567.svg", "readme.txt", "1f600.svg\n"],
    )
    def test_not_an_emoji_name(self, name):
        assert decode_filename(name) is None

    @pytest.mark.parametrize("name", ["110000.svg", "d800.svg", "1f3f3-dfff.svg"])
    def test_invalid_scalar_rejects_entry(self, name):
        assert decode_filename(name) is None


class TestBuildCatalog:
    def test_builds_from_directory(self, tmp_path):
        touch(tmp_path, "1f3f3.svg")
        touch(tmp_path, "1f3f3-fe0f-200d-1f308.svg")
        touch(tmp_path, "1f600.svg")
        touch(tmp_path, "LICENSE")
        touch(tmp_path, "110000.svg")
        (tmp_path / "2600.svg.d").mkdir()

        catalog = build_catalog(tmp_path)
        assert catalog.entries == frozenset({"\U0001F3F3", RAINBOW_FLAG, "\U0001F600"})

    def test_not_recursive(self, tmp_path):
        sub = tmp_path / "nested"
        sub.mkdir()
        touch(sub, "1f600.svg")
        assert len(build_catalog(tmp_path)) == 0

    def test_accepts_str_path(self, tmp_path):
        touch(tmp_path, "1f600.svg")
        assert "\U0001F600" in build_catalog(str(tmp_path))

    def test_deterministic(self, tmp_path):
        names = ["1f600.svg", "1f3f3.svg", "1f44d-1f3fd.svg", "2764-fe0f.svg"]
        first, second = tmp_path / "a", tmp_path / "b"
        first.mkdir()
        second.mkdir()
        for name in names:
            touch(first, name)
        for name in reversed(names):
            touch(second, name)
        assert build_catalog(first) == build_catalog(second)

    def test_missing_directory(self, tmp_path):
        with pytest.raises(CatalogIOError) as exc:
            build_catalog(tmp_path / "missing")
        assert isinstance(exc.value.error, FileNotFoundError)
        assert "io error while building emoji db" in str(exc.value)

    @pytest.mark.skipif(
        sys.platform == "win32" or sys.getfilesystemencoding().lower().replace("-", "") != "utf8",
        reason="нужна файловая система с байтовыми именами в utf-8",
    )
    def test_undecodable_filename_aborts_build(self, tmp_path):
        touch(tmp_path, "1f600.svg")
        raw = b"\xff\xfe.svg"
        try:
            with open(os.path.join(os.fsencode(tmp_path), raw), "wb") as f:
                f.write(b"<svg/>")
        except OSError:
            pytest.skip("файловая система не принимает такие имена")
        with pytest.raises(FilenameDecodeError) as exc:
            build_catalog(tmp_path)
        assert exc.value.raw_name == raw
        assert "failed to read twemoji filename" in str(exc.value)
