from __future__ import annotations

from collections.abc import Callable, Sequence
from pathlib import Path

from gitignore_gen.ecosystems import DetectionError, detect_labels, unique_labels
from gitignore_gen.models import GenerationResult
from gitignore_gen.remote import TemplateFetchError, fetch_template, template_url
from gitignore_gen.writer import WriteError, write_gitignore


class GenerateError(Exception):
    pass


def generate(
    root: Path,
    output_dir: Path | None = None,
    technologies: Sequence[str] | None = None,
    force: bool = False,
    timeout_seconds: float | None = None,
    progress: Callable[[str], None] | None = None,
) -> GenerationResult:
    """Detect technologies under ``root`` and write their ``.gitignore``.

    ``technologies`` replaces detection when given. ``force`` is accepted for
    compatibility only: an existing ``.gitignore`` is always overwritten.
    """
    _ = force
    note = progress or (lambda _msg: None)
    output_dir = output_dir or root

    if technologies:
        labels = unique_labels(technologies)
        detected = False
    else:
        note(f"Scanning {root}")
        try:
            labels = detect_labels(root)
        except DetectionError as exc:
            raise GenerateError(f"failed to analyze project: {exc}") from exc
        detected = True
    if not labels:
        raise GenerateError("no supported technologies detected in the project")

    url = template_url(labels)
    note(f"Fetching {url}")
    try:
        content = fetch_template(labels, timeout_seconds=timeout_seconds)
    except TemplateFetchError as exc:
        raise GenerateError(f"failed to fetch gitignore template: {exc}") from exc

    try:
        target = write_gitignore(content, output_dir)
    except WriteError as exc:
        raise GenerateError(f"failed to write .gitignore file: {exc}") from exc
    written = target.stat().st_size
    note(f"Wrote {written} bytes to {target}")

    return GenerationResult(
        labels=labels,
        url=url,
        output_path=str(target),
        bytes_written=written,
        detected=detected,
    )
