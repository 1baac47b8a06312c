"""Output formatters for keyword extraction results."""

import csv
import json
from pathlib import Path
from typing import TextIO

from .models import ExtractionResult


def result_to_dict(result: ExtractionResult) -> dict:
    """
    Convert an extraction result to a JSON-ready dict.

    Detailed results use the "detailedOutput" key, summaries the "summary" key;
    both carry "time" (seconds) and "kwCount".
    """
    if result.detailed:
        data = {"detailedOutput": [r.to_dict() for r in result.records]}
    else:
        data = {"summary": [kw.to_dict() for kw in result.keywords]}
    data["time"] = result.elapsed
    data["kwCount"] = result.keyword_count
    return data


def write_json(result: ExtractionResult, output: str | Path | TextIO, indent: int = 2) -> None:
    """Write an extraction result as JSON."""
    data = result_to_dict(result)

    if isinstance(output, (str, Path)):
        with open(output, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=indent, ensure_ascii=False)
    else:
        json.dump(data, output, indent=indent, ensure_ascii=False)


def write_csv(result: ExtractionResult, output: str | Path | TextIO) -> None:
    """
    Write an extraction result as CSV, one row per keyword.

    CSV columns: row, line, label, uri, topic (row and line empty for summaries)
    """
    fieldnames = ["row", "line", "label", "uri", "topic"]

    def write_to_file(f: TextIO) -> None:
        writer = csv.DictWriter(f, fieldnames=fieldnames)
        writer.writeheader()

        if result.detailed:
            for record in result.records:
                for kw in record.keywords:
                    writer.writerow({
                        "row": record.row,
                        "line": record.line,
                        "label": kw.label,
                        "uri": kw.uri,
                        "topic": kw.topic or "",
                    })
        else:
            for kw in result.keywords:
                writer.writerow({
                    "row": "",
                    "line": "",
                    "label": kw.label,
                    "uri": kw.uri,
                    "topic": kw.topic or "",
                })

    if isinstance(output, (str, Path)):
        with open(output, "w", newline="", encoding="utf-8") as f:
            write_to_file(f)
    else:
        write_to_file(output)


def format_output(result: ExtractionResult, output: str | Path | TextIO, format: str = "json") -> None:
    """Write a result in the given format ("json" or "csv")."""
    if format == "json":
        write_json(result, output)
    elif format == "csv":
        write_csv(result, output)
    else:
        raise ValueError(f"Unknown output format: {format}")
