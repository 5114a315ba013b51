from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Tuple


class NodeKind(Enum):
    CLASS = "class"
    PACKAGE = "package"
    TARGET = "target"


class DuplicatePolicy(Enum):
    """What to do when a node id reappears with different metadata"""
    REJECT = "reject"
    KEEP_FIRST = "keep_first"


# Longest prefix wins, so order does not matter here.
DEFAULT_PACKAGE_PREFIXES: Tuple[Tuple[str, str], ...] = (
    ("org.chromium.chrome.browser.", "o.c.c.b."),
    ("org.chromium.components.", "o.c.cm."),
    ("org.chromium.content_public.", "o.c.cp."),
    ("org.chromium.base.", "o.c.b."),
    ("org.chromium.ui.", "o.c.ui."),
    ("org.chromium.", "o.c."),
    ("androidx.", "ax."),
    ("android.", "a."),
)

DEFAULT_TARGET_PREFIXES: Tuple[Tuple[str, str], ...] = (
    ("//chrome/android", "//c/a"),
    ("//chrome/browser", "//c/b"),
    ("//components", "//cm"),
    ("//content/public/android", "//cp/a"),
    ("//base/android", "//b/a"),
    ("//third_party/android_deps", "//t/a_d"),
    ("//third_party/androidx", "//t/ax"),
    ("//third_party", "//t"),
)


@dataclass(frozen=True)
class ShortNameConfig:
    package_prefixes: Tuple[Tuple[str, str], ...] = DEFAULT_PACKAGE_PREFIXES
    target_prefixes: Tuple[Tuple[str, str], ...] = DEFAULT_TARGET_PREFIXES


@dataclass(frozen=True)
class LoaderConfig:
    duplicate_policy: DuplicatePolicy = DuplicatePolicy.REJECT
    short_names: ShortNameConfig = field(default_factory=ShortNameConfig)


DEFAULT_LOADER_CONFIG = LoaderConfig()

# Keys of the combined document written by the graph generator.
GRAPH_DOCUMENT_KEYS: Dict[NodeKind, str] = {
    NodeKind.CLASS: "class_graph",
    NodeKind.PACKAGE: "package_graph",
    NodeKind.TARGET: "target_graph",
}
BUILD_METADATA_KEY = "build_metadata"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
