"""Tests for building the working header sequence."""

from __future__ import annotations

from pathlib import Path

import pytest

from headerset.resolution import (
    HeaderRecord,
    HeaderSetBuilder,
    MissingFileError,
    VisibilityClass,
)


def _touch(path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("#pragma once\n")
    return path


def test_build_keeps_base_headers_first(tmp_path: Path):
    extra = _touch(tmp_path / "Extra.h")
    base = [
        HeaderRecord("/S/A.h", VisibilityClass.public),
        HeaderRecord("/S/B.h", VisibilityClass.private),
    ]
    headers = HeaderSetBuilder().build(base, {VisibilityClass.public: [str(extra)]})
    assert [h.path for h in headers] == ["/S/A.h", "/S/B.h", str(extra)]
    assert not headers[0].is_extra
    assert headers[2].is_extra
    assert headers[2].visibility is VisibilityClass.public


def test_build_does_not_mutate_base(tmp_path: Path):
    extra = _touch(tmp_path / "Extra.h")
    base = [HeaderRecord("/S/A.h", VisibilityClass.public)]
    HeaderSetBuilder().build(base, {VisibilityClass.public: [str(extra)]})
    assert len(base) == 1


def test_build_classes_in_fixed_order(tmp_path: Path):
    pub = _touch(tmp_path / "Pub.h")
    priv = _touch(tmp_path / "Priv.h")
    proj = _touch(tmp_path / "Proj.h")
    additive = {
        VisibilityClass.project: [str(proj)],
        VisibilityClass.private: [str(priv)],
        VisibilityClass.public: [str(pub)],
    }
    headers = HeaderSetBuilder().build([], additive)
    assert [h.visibility for h in headers] == [
        VisibilityClass.public,
        VisibilityClass.private,
        VisibilityClass.project,
    ]


def test_build_makes_paths_absolute(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _touch(tmp_path / "include" / "foo" / "Foo.h")
    monkeypatch.chdir(tmp_path)
    headers = HeaderSetBuilder().build([], {VisibilityClass.public: ["include/foo/Foo.h"]})
    assert headers[0].path == str(tmp_path / "include" / "foo" / "Foo.h")
    assert headers[0].include_name == "foo/Foo.h"


def test_build_uses_include_namer(tmp_path: Path):
    extra = _touch(tmp_path / "Extra.h")
    builder = HeaderSetBuilder(include_namer=lambda path: "Custom/" + Path(path).name)
    headers = builder.build([], {VisibilityClass.private: [str(extra)]})
    assert headers[0].include_name == "Custom/Extra.h"


def test_build_include_name_none_outside_known_layouts(tmp_path: Path):
    extra = _touch(tmp_path / "src" / "Extra.h")
    headers = HeaderSetBuilder().build([], {VisibilityClass.public: [str(extra)]})
    assert headers[0].include_name is None


def test_build_missing_file(tmp_path: Path):
    missing = tmp_path / "Missing.h"
    with pytest.raises(MissingFileError) as exc:
        HeaderSetBuilder().build([], {VisibilityClass.private: [str(missing)]})
    assert exc.value.path == str(missing)
    assert exc.value.visibility is VisibilityClass.private
    assert "private" in str(exc.value)
    assert str(missing) in str(exc.value)


def test_extend_keeps_headers_added_before_failure(tmp_path: Path):
    good = _touch(tmp_path / "Good.h")
    headers: list[HeaderRecord] = []
    with pytest.raises(MissingFileError):
        HeaderSetBuilder().extend(
            headers, {VisibilityClass.public: [str(good), str(tmp_path / "Missing.h")]}
        )
    assert [h.path for h in headers] == [str(good)]


def test_build_expands_directories_sorted(tmp_path: Path):
    headers_dir = tmp_path / "Headers"
    _touch(headers_dir / "b.h")
    _touch(headers_dir / "a.h")
    _touch(headers_dir / "sub" / "c.hpp")
    _touch(headers_dir / "notes.txt")
    headers = HeaderSetBuilder().build([], {VisibilityClass.public: [str(headers_dir)]})
    assert [h.path for h in headers] == [
        str(headers_dir / "a.h"),
        str(headers_dir / "b.h"),
        str(headers_dir / "sub" / "c.hpp"),
    ]


def test_build_allows_duplicates(tmp_path: Path):
    extra = _touch(tmp_path / "Dup.h")
    base = [HeaderRecord(str(extra), VisibilityClass.public)]
    headers = HeaderSetBuilder().build(
        base,
        {VisibilityClass.public: [str(extra)], VisibilityClass.private: [str(extra)]},
    )
    assert [h.path for h in headers] == [str(extra)] * 3


def test_defaults_used_when_class_absent(tmp_path: Path):
    default = _touch(tmp_path / "Default.h")
    builder = HeaderSetBuilder(defaults={VisibilityClass.private: [str(default)]})
    headers = builder.build([], {})
    assert [h.path for h in headers] == [str(default)]
    assert headers[0].is_extra


def test_empty_additive_list_replaces_defaults(tmp_path: Path):
    default = _touch(tmp_path / "DefaultPrivate.h")
    builder = HeaderSetBuilder(defaults={VisibilityClass.private: [str(default)]})
    headers = builder.build([], {VisibilityClass.private: []})
    assert [h for h in headers if h.visibility is VisibilityClass.private] == []


def test_additive_list_replaces_only_its_class(tmp_path: Path):
    default_pub = _touch(tmp_path / "DefaultPublic.h")
    default_priv = _touch(tmp_path / "DefaultPrivate.h")
    given = _touch(tmp_path / "Given.h")
    builder = HeaderSetBuilder(
        defaults={
            VisibilityClass.public: [str(default_pub)],
            VisibilityClass.private: [str(default_priv)],
        }
    )
    headers = builder.build([], {VisibilityClass.private: [str(given)]})
    assert [h.path for h in headers] == [str(default_pub), str(given)]


def test_effective_additive():
    builder = HeaderSetBuilder(defaults={VisibilityClass.public: ["a.h"]})
    assert builder.effective_additive({}) == {VisibilityClass.public: ["a.h"]}
    assert builder.effective_additive({VisibilityClass.public: []}) == {VisibilityClass.public: []}
