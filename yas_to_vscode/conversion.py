"""Batch conversion of a yasnippet snippet tree into VS Code JSON files.

A yasnippet tree holds one directory per major mode (`rust-mode/`,
`python-mode/`, ...), each containing one file per snippet. Every mode
directory becomes one `<language>.json` file mapping snippet names to
snippet records.
"""

import json
import logging
from pathlib import Path
from typing import Dict, List, Optional, Union

from pydantic import BaseModel, Field

from .errors import ConversionWarning, SnippetError
from .results import Converted
from .snippet import Snippet

logger = logging.getLogger(__name__)

MODE_SUFFIX = "-mode"


class ConversionReport(BaseModel):
    """Outcome of converting one mode directory."""

    language: str
    source: Path
    destination: Optional[Path] = None
    snippets: Dict[str, Snippet] = Field(default_factory=dict)
    warnings: Dict[str, List[ConversionWarning]] = Field(default_factory=dict)
    failures: Dict[str, str] = Field(default_factory=dict)


def mode_language(dirname: str) -> str:
    """Language name for a mode directory, e.g. `rust-mode` -> `rust`."""
    if dirname.endswith(MODE_SUFFIX) and len(dirname) > len(MODE_SUFFIX):
        return dirname[: -len(MODE_SUFFIX)]
    return dirname


def _visible(path: Path) -> bool:
    # yasnippet keeps .yas-parents and friends next to the snippets
    return not path.name.startswith(".")


def snippet_files(directory: Path) -> List[Path]:
    return sorted(p for p in directory.iterdir() if p.is_file() and _visible(p))


def convert_file(path: Union[str, Path], strict: bool = False) -> Converted[Snippet]:
    """Convert a single snippet file, named after its file name."""
    path = Path(path)
    return Snippet.parse(path.name, path.read_text(encoding="utf-8"), strict=strict)


def convert_directory(directory: Union[str, Path], strict: bool = False) -> ConversionReport:
    """Convert every snippet file of one mode directory.

    Files that cannot be converted are recorded in `failures` and skipped;
    they never stop the rest of the directory.
    """
    directory = Path(directory)
    report = ConversionReport(language=mode_language(directory.name), source=directory)

    for path in snippet_files(directory):
        try:
            converted = convert_file(path, strict=strict)
        except SnippetError as e:
            logger.warning(f"Skipping {path}: {e}")
            report.failures[path.name] = str(e)
            continue
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Could not read {path}: {e}")
            report.failures[path.name] = f"unreadable: {e}"
            continue

        report.snippets[path.name] = converted.result
        if converted.warnings:
            report.warnings[path.name] = converted.warnings
            logger.debug(
                f"{path.name} in {report.language}: "
                f"{', '.join(w.value for w in converted.warnings)}"
            )

    logger.debug(
        f"Converted {len(report.snippets)} snippets from {directory} "
        f"({len(report.failures)} skipped)"
    )
    return report


def write_snippets(snippets: Dict[str, Snippet], output_path: Path) -> None:
    """Write snippets to a VS Code snippets JSON file, sorted by name."""
    data = {name: snippets[name].model_dump() for name in sorted(snippets)}
    with open(output_path, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2, ensure_ascii=False)
    logger.info(f"Wrote {len(data)} snippets to {output_path}")


def convert_tree(
    source: Union[str, Path], destination: Union[str, Path], strict: bool = False
) -> List[ConversionReport]:
    """Convert each mode directory under `source` into `destination/<language>.json`."""
    source, destination = Path(source), Path(destination)
    destination.mkdir(parents=True, exist_ok=True)

    reports = []
    for directory in sorted(p for p in source.iterdir() if p.is_dir() and _visible(p)):
        report = convert_directory(directory, strict=strict)
        report.destination = destination / f"{report.language}.json"
        write_snippets(report.snippets, report.destination)
        reports.append(report)
    return reports
