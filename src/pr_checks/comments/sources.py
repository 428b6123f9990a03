# src/pr_checks/comments/sources.py
import json
import logging
from pathlib import Path
from pr_checks.models.sources import (
    MessagesSource,
    ResultsField,
    ResultsFileSource,
    SectionSource,
)


logger = logging.getLogger(__name__)

RESULTS_FILENAME = "output.json"

RESULTS_HEADINGS = {
    ResultsField.CHANGED_APIS: "### API Changes Detected",
    ResultsField.BREAKING_CHANGES: "### Breaking API Changes Detected",
}


def _reject_constant(name: str):
    raise ValueError(f"Unsupported JSON constant: {name}")


def results_file_section(
    scratch_dir: str | Path,
    field: ResultsField = ResultsField.CHANGED_APIS,
    filename: str = RESULTS_FILENAME,
) -> str | None:
    """Build a comment section from the results file in scratch_dir.

    Returns None when the file is missing, blank, or reports no items in
    `field`. Content that is not valid JSON is passed through as-is.
    """
    path = Path(scratch_dir) / filename
    if not path.exists():
        return None

    content = path.read_text(encoding="utf-8", errors="replace").strip()
    if not content:
        return None

    try:
        data = json.loads(content, parse_constant=_reject_constant)
    except ValueError as e:
        logger.warning(f"Could not parse {path}: {e}")
        return content

    if not isinstance(data, dict) or not data.get(field.value):
        return None

    return f"{RESULTS_HEADINGS[field]}\n\n```json\n{json.dumps(data, indent=2, ensure_ascii=False)}\n```"


def derive_sections(source: SectionSource) -> list[str | None]:
    """Map a section source to the list of candidate comment sections."""
    if isinstance(source, MessagesSource):
        return list(source.messages)
    if isinstance(source, ResultsFileSource):
        return [results_file_section(source.scratch_dir, source.field)]
    raise TypeError(f"Unsupported section source: {type(source).__name__}")
