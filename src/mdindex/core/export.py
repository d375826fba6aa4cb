"""Output writers: JSON text, per-file JSON files, and zip archives"""

import json
import logging
import zipfile
from pathlib import Path, PurePosixPath

from mdindex.core.models import BatchResult, OutputRecord


logger = logging.getLogger(__name__)


def output_name(source_name: str) -> str:
    """Replace the source extension with .json (post.mdx -> post.json)."""
    return str(PurePosixPath(source_name.replace('\\', '/')).with_suffix('.json'))


def record_to_json(record: OutputRecord, indent: int | None = 2) -> str:
    """Serialize a record with its camelCase key names."""
    return json.dumps(record.to_dict(), indent=indent or None, ensure_ascii=False)


def write_record(record: OutputRecord, path: Path, indent: int | None = 2) -> Path:
    """Write one record as a JSON file, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(record_to_json(record, indent), encoding='utf-8')
    return path


def write_batch(result: BatchResult, output_dir: Path, indent: int | None = 2) -> list[Path]:
    """Write one JSON file per successful item under output_dir. Returns written paths."""
    written = []
    for item in result.items:
        if item.status != "success":
            continue
        written.append(write_record(item.data, output_dir / output_name(item.filename), indent))
    logger.info("Wrote %d record(s) to %s", len(written), output_dir)
    return written


def write_archive(result: BatchResult, archive_path: Path, indent: int | None = 2) -> list[str]:
    """Bundle one JSON member per successful item into a zip. Returns member names.

    Failed items are skipped.
    """
    archive_path.parent.mkdir(parents=True, exist_ok=True)
    members = []
    with zipfile.ZipFile(archive_path, 'w', compression=zipfile.ZIP_DEFLATED) as zf:
        for item in result.items:
            if item.status != "success":
                continue
            name = output_name(item.filename)
            zf.writestr(name, record_to_json(item.data, indent))
            members.append(name)
    logger.info("Wrote %d record(s) to %s", len(members), archive_path)
    return members
