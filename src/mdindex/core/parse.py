"""Frontmatter splitting, YAML decoding, and OutputRecord assembly"""

import logging
import re
import uuid
from datetime import datetime, timezone
from typing import Any

import yaml

from mdindex.core.analyze import analyze_content, split_sentences
from mdindex.core.errors import FormatError, ProcessingError, YamlDecodeError
from mdindex.core.models import Content, ContentAnalysis, Embeddings, OutputRecord
from mdindex.core.validate import iso_timestamp, validate_metadata


logger = logging.getLogger(__name__)

# Optional leading whitespace, `---` line, one or more YAML lines, `---` line, body.
FRONTMATTER_RE = re.compile(
    r'\A\s*---[ \t]*\r?\n(.+?)\r?\n---[ \t]*(?:\r?\n|\Z)(.*)\Z', re.DOTALL,
)

SOURCE         = "mdx-converter"
CONTENT_TYPE   = "mdx"
KNOWLEDGE_TYPE = "document"

SUMMARY_FIELDS = ("description", "summary", "excerpt")
SUMMARY_LENGTH = 200


def split_frontmatter(raw_text: str) -> tuple[str, str]:
    """Return (yaml_block, body); raise FormatError when no frontmatter block opens the text."""
    m = FRONTMATTER_RE.match(raw_text)
    if not m:
        raise FormatError("Invalid frontmatter format: expected a '---' delimited YAML block at the start")
    return m.group(1), m.group(2)


def decode_frontmatter(block: str) -> dict[str, Any]:
    """Decode the YAML block into a mapping."""
    try:
        fm = yaml.safe_load(block)
    except yaml.YAMLError as e:
        raise YamlDecodeError(f"Invalid YAML frontmatter: {e}") from e
    if fm is None:
        return {}
    if not isinstance(fm, dict):
        raise YamlDecodeError(f"Invalid YAML frontmatter: expected a mapping, got {type(fm).__name__}")
    # YAML allows int, bool, and date keys; records carry JSON object keys.
    return {str(k): v for k, v in fm.items()}


def _summary(metadata: dict[str, Any], plain_text: str) -> str:
    """Frontmatter description if given, else the leading words of plain_text."""
    for field in SUMMARY_FIELDS:
        if metadata.get(field):
            return str(metadata[field])
    if len(plain_text) <= SUMMARY_LENGTH:
        return plain_text
    cut = plain_text[:SUMMARY_LENGTH]
    if ' ' in cut:
        cut = cut.rsplit(' ', 1)[0]
    return cut.rstrip() + "..."


def build_record(metadata: dict[str, Any], analysis: ContentAnalysis) -> OutputRecord:
    """Assemble the OutputRecord from validated metadata and body analysis."""
    record_metadata = {
        **metadata,
        "timestamp": iso_timestamp(datetime.now(timezone.utc)),
        "source": SOURCE,
        "contentType": CONTENT_TYPE,
        "knowledgeType": KNOWLEDGE_TYPE,
        "wordCount": analysis.word_count,
        "readingTime": analysis.reading_time,
    }
    return OutputRecord(
        id=str(uuid.uuid4()),
        metadata=record_metadata,
        content=Content(
            **analysis.model_dump(),
            chunks=split_sentences(analysis.plain_text),
        ),
        embeddings=Embeddings(
            title=str(metadata["title"]),
            summary=_summary(metadata, analysis.plain_text),
            tags=metadata["tags"],
            category=str(metadata["category"]),
        ),
    )


def check_document(raw_text: str) -> dict[str, Any]:
    """Split, decode, and validate frontmatter only; return the normalized metadata.

    Failures are raised as ProcessingError, like parse_document.
    """
    try:
        block, _ = split_frontmatter(raw_text)
        return validate_metadata(decode_frontmatter(block))
    except Exception as e:
        raise ProcessingError(f"Failed to process document: {e}") from e


def parse_document(raw_text: str) -> OutputRecord:
    """Convert a frontmatter + markdown document into an OutputRecord.

    Every failure, including the specific FormatError, YamlDecodeError, and
    ValidationError kinds, is re-raised as ProcessingError carrying the
    inner message.
    """
    try:
        block, body = split_frontmatter(raw_text)
        metadata = validate_metadata(decode_frontmatter(block))
        analysis = analyze_content(body)
        record = build_record(metadata, analysis)
    except Exception as e:
        logger.debug("Document failed to parse: %s", e)
        raise ProcessingError(f"Failed to process document: {e}") from e
    logger.debug("Parsed %r: %d words, %d links", record.embeddings.title,
                 analysis.word_count, len(analysis.links))
    return record
