"""POST /api/interpret/* — drawing and document interpretation."""

from __future__ import annotations

import asyncio
import json
import time
from collections.abc import AsyncGenerator

from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import StreamingResponse

from plansight.config import Settings
from plansight.dependencies import get_settings
from plansight.engine.context import DrawingContext
from plansight.engine.document_narrative import summarize_document
from plansight.engine.pipeline import Pipeline, create_pipeline
from plansight.models.requests import InterpretDocumentRequest, InterpretDrawingRequest
from plansight.models.responses import (
    DocumentInterpretationResponse,
    DrawingInterpretationResponse,
)

router = APIRouter(prefix="/interpret")


_SENTINEL = object()  # marks end of queue


def _check_size(count: int, settings: Settings) -> None:
    if count > settings.max_elements:
        raise HTTPException(
            status_code=413,
            detail=f"{count} items exceeds the limit of {settings.max_elements}",
        )


def _pipeline(settings: Settings) -> Pipeline:
    return create_pipeline(settings.pipeline_config())


def _build_context(req: InterpretDrawingRequest) -> DrawingContext:
    return DrawingContext(
        elements=list(req.elements),
        file_name=req.file_name,
        file_size=req.file_size,
    )


def _to_response(ctx: DrawingContext, elapsed_ms: float) -> DrawingInterpretationResponse:
    return DrawingInterpretationResponse(
        file_name=ctx.file_name,
        file_size=ctx.file_size,
        elements=ctx.elements,
        analysis=ctx.analysis,
        structures=ctx.structures,
        interpretation=ctx.interpretation,
        processing_time_ms=round(elapsed_ms, 1),
        transforms_completed=len(ctx.completed_transforms),
        transforms_failed=len(ctx.errors),
        transforms_skipped=sorted(ctx.skipped_transforms),
        errors=ctx.errors,
    )


async def _stream_interpret(ctx: DrawingContext, pipeline: Pipeline) -> AsyncGenerator[str, None]:
    """Drive pipeline.run_streaming() in a thread, yielding SSE events as they arrive."""
    start = time.perf_counter()

    loop = asyncio.get_running_loop()
    queue: asyncio.Queue = asyncio.Queue()

    def _run_pipeline() -> None:
        """Sync pipeline in thread; pushes progress dicts onto the async queue."""
        try:
            for progress in pipeline.run_streaming(ctx):
                loop.call_soon_threadsafe(queue.put_nowait, progress)
        finally:
            loop.call_soon_threadsafe(queue.put_nowait, _SENTINEL)

    # Keep the event loop free to flush SSE while the pipeline works
    worker = loop.run_in_executor(None, _run_pipeline)

    while True:
        item = await queue.get()
        if item is _SENTINEL:
            break
        yield f"event: progress\ndata: {json.dumps(item)}\n\n"

    await worker

    response = _to_response(ctx, (time.perf_counter() - start) * 1000)
    yield f"event: result\ndata: {response.model_dump_json()}\n\n"
    yield f"event: done\ndata: {json.dumps({'type': 'done'})}\n\n"


@router.post("/drawing/stream")
async def interpret_drawing_stream(
    req: InterpretDrawingRequest,
    settings: Settings = Depends(get_settings),
) -> StreamingResponse:
    _check_size(len(req.elements), settings)
    return StreamingResponse(
        _stream_interpret(_build_context(req), _pipeline(settings)),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )


@router.post("/drawing", response_model=DrawingInterpretationResponse)
async def interpret_drawing(
    req: InterpretDrawingRequest,
    settings: Settings = Depends(get_settings),
) -> DrawingInterpretationResponse:
    _check_size(len(req.elements), settings)
    start = time.perf_counter()

    # The room search is CPU-bound; keep it off the event loop
    loop = asyncio.get_running_loop()
    ctx = await loop.run_in_executor(None, _pipeline(settings).run, _build_context(req))

    return _to_response(ctx, (time.perf_counter() - start) * 1000)


@router.post("/document", response_model=DocumentInterpretationResponse)
async def interpret_document(
    req: InterpretDocumentRequest,
    settings: Settings = Depends(get_settings),
) -> DocumentInterpretationResponse:
    _check_size(len(req.sections), settings)
    return DocumentInterpretationResponse(
        file_name=req.file_name,
        file_size=req.file_size,
        title=req.title,
        sections=req.sections,
        interpretation=summarize_document(req.sections, req.title),
    )
