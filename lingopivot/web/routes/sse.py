"""Server-Sent Events streaming routes."""

import json
from typing import AsyncGenerator
from fastapi import APIRouter, Request, HTTPException
from fastapi.responses import StreamingResponse

from ...translation.model_pipeline import LoadStatus, ModelPipeline

router = APIRouter()

HEARTBEAT_SECONDS = 30.0


async def stream_model_progress(
    pipeline: ModelPipeline, heartbeat: float = HEARTBEAT_SECONDS
) -> AsyncGenerator[str, None]:
    """
    Yield Server-Sent Events for the model backend load.

    Yields SSE-formatted strings.
    """
    async for progress in pipeline.progress(heartbeat=heartbeat):
        if progress is None:
            # Send heartbeat to keep connection alive
            yield ": heartbeat\n\n"
            continue

        data = json.dumps(progress.to_dict())
        if progress.status == LoadStatus.READY:
            yield f"event: complete\ndata: {data}\n\n"
        elif progress.status == LoadStatus.FAILED:
            yield f"event: error\ndata: {data}\n\n"
        else:
            yield f"event: progress\ndata: {data}\n\n"


@router.get("/models/progress")
async def stream_model_load_progress(request: Request, load: bool = False):
    """
    Stream model backend load progress via Server-Sent Events.

    Pass ``load=true`` to start loading the backend if it is idle.

    Events:
    - progress: {"status": "idle|loading", "percentage": float, "message": str, "backend": str, "pending": int}
    - complete: the same fields with status "ready"
    - error: the same fields with status "failed"
    """
    pipeline = request.app.state.translator.model_pipeline
    if pipeline is None:
        raise HTTPException(404, "No model backend configured")

    if load:
        pipeline.start_loading()

    return StreamingResponse(
        stream_model_progress(pipeline),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
