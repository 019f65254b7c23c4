import asyncio

import pytest

from conftest import FakeBackend, make_config
from lingopivot.exceptions import BackendError, BackendTimeoutError, QueueFullError, StaleRequestError
from lingopivot.translation.model_pipeline import LoadStatus, ModelPipeline
from lingopivot.web.routes.sse import stream_model_progress


async def test_translate_loads_backend_and_uses_model_codes():
    backend = FakeBackend(reply="नमस्ते")
    pipeline = ModelPipeline(backend)

    result = await pipeline.translate("hello", "english", "hindi")

    assert result == "नमस्ते"
    assert backend.load_calls == 1
    assert backend.calls == [("hello", "eng_Latn", "hin_Deva")]
    assert pipeline.is_ready
    assert pipeline.pending == 0


async def test_concurrent_callers_share_one_load():
    backend = FakeBackend(load_delay=0.05)
    pipeline = ModelPipeline(backend)

    results = await asyncio.gather(
        *(pipeline.translate(f"text {i}", "english", "spanish") for i in range(5))
    )

    assert results == ["translated"] * 5
    assert backend.load_calls == 1


async def test_failed_load_is_retried_by_next_call():
    backend = FakeBackend(load_failures=1)
    pipeline = ModelPipeline(backend)

    with pytest.raises(BackendError, match="model files missing"):
        await pipeline.translate("hello", "english", "hindi")
    assert pipeline.status == LoadStatus.FAILED

    assert await pipeline.translate("hello", "english", "hindi") == "translated"
    assert backend.load_calls == 2
    assert pipeline.status == LoadStatus.READY


async def test_load_timeout():
    pipeline = ModelPipeline(FakeBackend(load_delay=0.2), load_timeout=0.01)

    with pytest.raises(BackendTimeoutError):
        await pipeline.ensure_loaded()
    assert pipeline.status == LoadStatus.FAILED


async def test_translate_timeout():
    pipeline = ModelPipeline(FakeBackend(translate_delay=0.2), timeout=0.01)
    await pipeline.ensure_loaded()

    with pytest.raises(BackendTimeoutError) as excinfo:
        await pipeline.translate("hello", "english", "hindi")
    assert excinfo.value.timeout == 0.01


async def test_backend_exception_is_wrapped():
    backend = FakeBackend()
    backend.translate = lambda *args: 1 / 0
    pipeline = ModelPipeline(backend)

    with pytest.raises(BackendError, match="fake"):
        await pipeline.translate("hello", "english", "hindi")


async def test_request_waiting_too_long_is_stale():
    times = iter([0.0, 45.0])
    pipeline = ModelPipeline(FakeBackend(), queue_expiry=30.0, clock=lambda: next(times))

    with pytest.raises(StaleRequestError):
        await pipeline.translate("hello", "english", "hindi")
    assert pipeline.is_ready


async def test_full_queue_rejects_requests():
    backend = FakeBackend()
    pipeline = ModelPipeline(backend, queue_size=0)

    with pytest.raises(QueueFullError):
        await pipeline.translate("hello", "english", "hindi")
    assert backend.load_calls == 0


async def test_progress_reports_each_status_change():
    pipeline = ModelPipeline(FakeBackend())
    statuses = []

    async def collect():
        async for progress in pipeline.progress():
            statuses.append(progress.status)

    task = asyncio.ensure_future(collect())
    await asyncio.sleep(0)
    await pipeline.ensure_loaded()
    await asyncio.wait_for(task, timeout=1)

    assert statuses == [LoadStatus.IDLE, LoadStatus.LOADING, LoadStatus.READY]


async def test_progress_heartbeat():
    pipeline = ModelPipeline(FakeBackend())
    stream = pipeline.progress(heartbeat=0.01)

    first = await stream.__anext__()
    assert first.status == LoadStatus.IDLE
    assert await stream.__anext__() is None
    await stream.aclose()


async def test_sse_stream_for_ready_backend():
    pipeline = ModelPipeline(FakeBackend())
    await pipeline.ensure_loaded()

    events = [event async for event in stream_model_progress(pipeline)]

    assert len(events) == 1
    assert events[0].startswith("event: complete\ndata: ")
    assert '"status": "ready"' in events[0]


async def test_sse_stream_heartbeat():
    pipeline = ModelPipeline(FakeBackend())
    stream = stream_model_progress(pipeline, heartbeat=0.01)

    assert (await stream.__anext__()).startswith("event: progress")
    assert await stream.__anext__() == ": heartbeat\n\n"
    await stream.aclose()


def test_snapshot_serializes():
    snapshot = ModelPipeline(FakeBackend()).snapshot().to_dict()
    assert snapshot == {
        "status": "idle",
        "percentage": 0.0,
        "message": "Backend not loaded",
        "backend": "fake",
        "pending": 0,
    }


def test_from_config_without_backend():
    assert ModelPipeline.from_config(make_config(model_backend="none")) is None
    assert ModelPipeline.from_config(make_config(model_backend="deepl", enable_model_fallback=False)) is None
