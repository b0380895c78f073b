"""Document comparison API endpoints"""

from __future__ import annotations

from typing import Any, AsyncIterator, Sequence

from fastapi import APIRouter, HTTPException
from fastapi.concurrency import run_in_threadpool
from sse_starlette.sse import EventSourceResponse

from docdiff.models.compare import (
    CompareRequest,
    ExtractRequest,
    ExtractResponse,
    LinesCompareRequest,
    StreamEvent,
)
from docdiff.models.diff import DiffMode, DiffResult, TieBreak
from docdiff.services.config_manager import ConfigManager
from docdiff.services.diff_cache import DiffCache
from docdiff.services.document_differ import DocumentDiffer
from docdiff.services.line_extractor import extract_lines

router = APIRouter()

# In-memory result cache, sized from config at startup
diff_cache = DiffCache()


def check_size(lines: Sequence[str], side: str, max_lines: int):
    """Reject inputs that would make the quadratic LCS table too large"""
    if max_lines and len(lines) > max_lines:
        raise HTTPException(
            status_code=413,
            detail=f"{side} document has {len(lines)} lines (limit {max_lines})",
        )


def check_sizes(original: Sequence[str], modified: Sequence[str]):
    """Apply the configured line limit to both sides"""
    max_lines = int(ConfigManager.get_instance().diff_settings().get("maxLines", 0))
    check_size(original, "original", max_lines)
    check_size(modified, "modified", max_lines)


def run_diff(
    original: Sequence[str],
    modified: Sequence[str],
    mode: DiffMode | None,
) -> DiffResult:
    """
    Diff two line sequences with the configured settings, through the cache.

    CPU-bound (the LCS table is m*n): call it from a worker thread, never
    directly on the event loop.
    """
    settings = ConfigManager.get_instance().diff_settings()
    max_lines = int(settings.get("maxLines", 0))
    check_size(original, "original", max_lines)
    check_size(modified, "modified", max_lines)

    mode = DiffMode(mode or settings["mode"])
    tie_break = TieBreak(settings["tieBreak"])

    key = DiffCache.key_for(original, modified, mode, tie_break)
    cached = diff_cache.get(key)
    if cached is not None:
        return cached

    result = DocumentDiffer(mode, tie_break).diff_lines(original, modified)
    diff_cache.put(key, result)
    print(
        f"[DiffRouter] {mode.value} diff: {len(original)} -> {len(modified)} lines, "
        f"{result.stats.total} entries" + ("" if result.has_changes else " (no changes)")
    )
    return result


def _sse(event: StreamEvent) -> dict[str, Any]:
    return {"event": "message", "data": event.model_dump_json(by_alias=True, exclude_none=True)}


async def diff_event_stream(
    original: Sequence[str],
    modified: Sequence[str],
    mode: DiffMode | None = None,
) -> AsyncIterator[dict[str, Any]]:
    """Compute the diff, then yield SSE payloads: one per entry, the stats, done"""
    try:
        result = await run_in_threadpool(run_diff, original, modified, mode)

        for entry in result.entries:
            yield _sse(StreamEvent(type="entry", entry=entry))

        yield _sse(StreamEvent(type="stats", stats=result.stats))
        yield _sse(StreamEvent(type="done", done=True))

    except Exception as e:
        print(f"[DiffRouter] Stream failed: {e}")
        yield _sse(StreamEvent(type="error", error=str(e)))


@router.post("/compare", response_model=DiffResult, response_model_exclude_none=True)
async def compare_documents(request: CompareRequest) -> DiffResult:
    """Compare two document trees line by line"""
    return await run_in_threadpool(
        run_diff,
        extract_lines(request.original),
        extract_lines(request.modified),
        request.mode,
    )


@router.post("/lines", response_model=DiffResult, response_model_exclude_none=True)
async def compare_lines(request: LinesCompareRequest) -> DiffResult:
    """Compare two already extracted line sequences"""
    return await run_in_threadpool(run_diff, request.original, request.modified, request.mode)


@router.post("/extract", response_model=ExtractResponse)
async def extract_document_lines(request: ExtractRequest) -> ExtractResponse:
    """Flatten a document tree into the lines a comparison would use"""
    lines = extract_lines(request.document)
    return ExtractResponse(lines=lines, count=len(lines))


@router.post("/stream")
async def compare_stream(request: CompareRequest):
    """Compare two document trees and stream the entries (SSE)"""
    original = extract_lines(request.original)
    modified = extract_lines(request.modified)
    # Oversized input is still an HTTP error, not a stream event
    check_sizes(original, modified)
    return EventSourceResponse(diff_event_stream(original, modified, request.mode))
