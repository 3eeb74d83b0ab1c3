"""Tests for include names and framework names."""

from __future__ import annotations

from headerset.resolution import create_include_name, framework_name_from_install_name


def test_include_name_from_include_dir():
    assert create_include_name("/usr/local/include/foo/bar.h") == "foo/bar.h"
    assert create_include_name("/usr/include/zlib.h") == "zlib.h"


def test_include_name_uses_first_include_dir():
    assert create_include_name("/opt/include/sub/include/x.h") == "sub/include/x.h"


def test_include_name_public_framework_header():
    assert create_include_name("/S/Foo.framework/Headers/Foo.h") == "Foo/Foo.h"


def test_include_name_private_framework_header():
    path = "/System/Library/Frameworks/Foo.framework/PrivateHeaders/Foo_Private.h"
    assert create_include_name(path) == "Foo/Foo_Private.h"


def test_include_name_versioned_framework_header():
    path = "/L/Foo.framework/Versions/A/Headers/sub/Bar.h"
    assert create_include_name(path) == "Foo/sub/Bar.h"


def test_include_name_unknown_layout():
    assert create_include_name("/src/Foo/Bar.h") is None


def test_framework_name_from_install_name():
    name = "/System/Library/Frameworks/Foo.framework/Versions/A/Foo"
    assert framework_name_from_install_name(name) == "Foo"
    assert framework_name_from_install_name("@rpath/Bar.framework/Bar") == "Bar"


def test_framework_name_nested_framework():
    name = "/S/Outer.framework/Versions/A/Frameworks/Inner.framework/Inner"
    assert framework_name_from_install_name(name) == "Inner"


def test_framework_name_plain_dylib():
    assert framework_name_from_install_name("/usr/lib/libfoo.dylib") is None
