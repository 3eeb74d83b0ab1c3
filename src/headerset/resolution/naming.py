"""
Naming conventions for headers and frameworks.

`create_include_name` is the default include-name service used for extra
headers; callers may pass any `IncludeNamer` instead.
"""

from __future__ import annotations

import re
from collections.abc import Callable

IncludeNamer = Callable[[str], str | None]

_INCLUDE_DIR = "/include/"
_FRAMEWORK_HEADER_RE = re.compile(r"/(.+)\.framework/(.+)?Headers/(.+)")
_FRAMEWORK_INSTALL_NAME_RE = re.compile(r"(.+)/(.+)\.framework/")


def create_include_name(full_path: str) -> str | None:
    """
    The spelling a consumer would use to include `full_path`:

    - `/usr/local/include/foo/bar.h` → `foo/bar.h`
    - `/S/Foo.framework/Headers/Foo.h` → `Foo/Foo.h`
    - `/S/Foo.framework/PrivateHeaders/Foo_Private.h` → `Foo/Foo_Private.h`

    Returns `None` when the path follows neither layout.
    """
    prefix = full_path.find(_INCLUDE_DIR)
    if prefix != -1:
        return full_path[prefix + len(_INCLUDE_DIR) :]

    match = _FRAMEWORK_HEADER_RE.search(full_path)
    if match is None:
        return None
    framework = match.group(1).rsplit("/", 1)[-1]
    return f"{framework}/{match.group(3)}"


def framework_name_from_install_name(install_name: str) -> str | None:
    """
    The framework name in an install name such as
    `/System/Library/Frameworks/Foo.framework/Versions/A/Foo` (→ `Foo`).
    """
    match = _FRAMEWORK_INSTALL_NAME_RE.match(install_name)
    if match is None:
        return None
    return match.group(2)
