"""Sequential batch conversion with per-file error isolation"""

import logging
import threading
from collections.abc import Callable, Iterable

from mdindex.core.errors import ProcessingError
from mdindex.core.models import BatchItem, BatchResult, SourceFile
from mdindex.core.parse import parse_document


logger = logging.getLogger(__name__)

CANCELLED = "Cancelled before processing"


def _as_source(item: SourceFile | tuple[str, str]) -> SourceFile:
    if isinstance(item, SourceFile):
        return item
    name, text = item
    return SourceFile(name=name, text=text)


def run_batch(
    files: Iterable[SourceFile | tuple[str, str]],
    on_progress: Callable[[int, int], None] | None = None,
    cancel: threading.Event | None = None,
    ) -> BatchResult:
    """Parse each file in order; one BatchItem per input, failures recorded not raised.

    on_progress(done, total) is called after every item. When cancel is set,
    the remaining items are recorded as errors without being parsed.
    """
    sources = [_as_source(f) for f in files]
    total = len(sources)
    items: list[BatchItem] = []

    for done, src in enumerate(sources, start=1):
        if cancel is not None and cancel.is_set():
            items.append(BatchItem(filename=src.name, status="error", error=CANCELLED))
        else:
            try:
                record = parse_document(src.text)
                items.append(BatchItem(filename=src.name, status="success", data=record))
                logger.info("Converted %s (%d/%d)", src.name, done, total)
            except ProcessingError as e:
                items.append(BatchItem(filename=src.name, status="error", error=str(e)))
                logger.warning("Failed to convert %s: %s", src.name, e)
        if on_progress is not None:
            on_progress(done, total)

    result = BatchResult(items=items)
    logger.info("Batch complete - %s", result.summary())
    return result
