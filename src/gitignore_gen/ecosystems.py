from __future__ import annotations

import os
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

DIRECTORY = "directory"
FILE = "file"


@dataclass(frozen=True)
class DetectionRule:
    kind: str
    matches: Callable[[str], bool]
    label: str


def _named(name: str) -> Callable[[str], bool]:
    return lambda entry: entry == name


def _suffixed(suffix: str) -> Callable[[str], bool]:
    return lambda entry: entry.endswith(suffix)


# Evaluated in order; the first matching rule labels the entry.
DETECTION_RULES: tuple[DetectionRule, ...] = (
    DetectionRule(DIRECTORY, _named("node_modules"), "Node"),
    DetectionRule(DIRECTORY, _named("venv"), "Python"),
    DetectionRule(DIRECTORY, _named(".venv"), "Python"),
    DetectionRule(DIRECTORY, _named("vendor"), "Go"),
    DetectionRule(FILE, _suffixed(".js"), "Node"),
    DetectionRule(FILE, _suffixed(".py"), "Python"),
    DetectionRule(FILE, _suffixed(".go"), "Go"),
    DetectionRule(FILE, _suffixed(".java"), "Java"),
    DetectionRule(FILE, _suffixed(".cs"), "VisualStudio"),
    DetectionRule(FILE, _named("package.json"), "Node"),
    DetectionRule(FILE, _named("requirements.txt"), "Python"),
    DetectionRule(FILE, _named("go.mod"), "Go"),
    DetectionRule(FILE, _named("pom.xml"), "Maven"),
    DetectionRule(FILE, _named("Cargo.toml"), "Rust"),
)


class DetectionError(Exception):
    pass


def _scan_dir(path: str) -> list[tuple[str, str, str]]:
    with os.scandir(path) as it:
        entries = sorted(it, key=lambda e: e.name)
    return [
        (e.name, DIRECTORY if e.is_dir(follow_symlinks=False) else FILE, e.path)
        for e in entries
    ]


def _walk(path: Path) -> Iterator[tuple[str, str]]:
    """Yield ``(name, kind)`` for every entry below ``path``, depth-first.

    Siblings come in lexical order. Links are classified without being
    followed, so a symlinked directory is reported as a file and never
    descended into. Depth is bounded only by the filesystem.
    """
    stack = list(reversed(_scan_dir(str(path))))
    while stack:
        name, kind, entry_path = stack.pop()
        yield name, kind
        if kind == DIRECTORY:
            stack.extend(reversed(_scan_dir(entry_path)))


def classify(name: str, kind: str) -> str | None:
    for rule in DETECTION_RULES:
        if rule.kind == kind and rule.matches(name):
            return rule.label
    return None


def scan_labels(root: Path) -> list[str]:
    """Return every label emitted while walking ``root``, duplicates included.

    The root directory is itself an entry, so running inside a directory
    called ``vendor`` reports ``Go``. Any filesystem error aborts the scan.
    """
    root = Path(root)
    labels: list[str] = []
    try:
        if not root.is_dir():
            raise NotADirectoryError(f"Not a directory: {root}")
        entries = [(Path(os.path.abspath(root)).name, DIRECTORY)]
        entries.extend(_walk(root))
    except OSError as exc:
        raise DetectionError(f"Unable to walk {root}: {exc}") from exc

    for name, kind in entries:
        label = classify(name, kind)
        if label is not None:
            labels.append(label)
    return labels


def unique_labels(labels: Iterable[str]) -> list[str]:
    seen: set[str] = set()
    out: list[str] = []
    for label in labels:
        if label in seen:
            continue
        seen.add(label)
        out.append(label)
    return out


def detect_labels(root: Path) -> list[str]:
    return unique_labels(scan_labels(root))
