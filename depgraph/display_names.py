from __future__ import annotations

from typing import Tuple

from core.config import ShortNameConfig

DEFAULT_SHORT_NAMES = ShortNameConfig()


def _replace_longest_prefix(name: str, prefixes: Tuple[Tuple[str, str], ...]) -> str:
    best: Tuple[str, str] | None = None
    for prefix, replacement in prefixes:
        if name.startswith(prefix) and (best is None or len(prefix) > len(best[0])):
            best = (prefix, replacement)
    if best is None:
        return name
    return best[1] + name[len(best[0]):]


def shorten_package_name(name: str, config: ShortNameConfig = DEFAULT_SHORT_NAMES) -> str:
    # Prefixes end with "." so the bare package itself needs the dot appended.
    shortened = _replace_longest_prefix(name + ".", config.package_prefixes)
    return shortened[:-1]


def shorten_class_name(name: str, config: ShortNameConfig = DEFAULT_SHORT_NAMES) -> str:
    package, sep, simple_name = name.rpartition(".")
    if not sep:
        return name
    return f"{shorten_package_name(package, config)}.{simple_name}"


def shorten_target_name(name: str, config: ShortNameConfig = DEFAULT_SHORT_NAMES) -> str:
    for prefix, replacement in sorted(config.target_prefixes, key=lambda item: -len(item[0])):
        if name == prefix or name.startswith(prefix + "/") or name.startswith(prefix + ":"):
            return replacement + name[len(prefix):]
    return name
