"""Batch cross-reference: chunked search over many queries, optional mount pairing."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Sequence

from tqdm import tqdm  # type: ignore[import-untyped]

from core.accessory import AccessoryLookup, normalize_mount_type, pair_mounts_for_batch
from core.search_engine import SearchEngine
from core.specs import SpecLookup
from models.schemas import BatchItem, BatchProgress, SearchResponse

logger = logging.getLogger(__name__)

DEFAULT_CHUNK_SIZE = 25

ProgressCallback = Callable[[BatchProgress], None]


async def run_batch_search_async(
    engine: SearchEngine,
    queries: Sequence[str],
    *,
    mount_types: Sequence[str | None] | None = None,
    accessories: AccessoryLookup | None = None,
    specs: SpecLookup | None = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
    cancel_event: asyncio.Event | None = None,
    on_progress: ProgressCallback | None = None,
    show_progress: bool = True,
) -> tuple[list[BatchItem], BatchProgress]:
    """
    Search queries chunk by chunk, yielding to the event loop between chunks.

    One memo is shared by every chunk, so a model repeated anywhere in the input is
    searched once. When cancel_event is set the run stops at the next chunk boundary
    and returns the rows finished so far (progress.cancelled is True).
    Rows come back in input order; mount_types[i] is free text for row i.
    """
    chunk_size = max(1, chunk_size)
    total = len(queries)
    memo: dict[str, SearchResponse] = {}
    items: list[BatchItem] = []
    progress = BatchProgress(total=total)

    with tqdm(total=total, desc="Cross-reference", unit="query", disable=not show_progress) as bar:
        for start in range(0, total, chunk_size):
            if cancel_event is not None and cancel_event.is_set():
                logger.info("Batch cancelled after %d of %d queries", len(items), total)
                progress = progress.model_copy(update={"cancelled": True})
                break
            chunk = queries[start : start + chunk_size]
            responses = engine.search_batch(chunk, memo=memo)
            for offset, query in enumerate(chunk):
                row = start + offset
                raw_mount = mount_types[row] if mount_types is not None and row < len(mount_types) else None
                items.append(
                    BatchItem(
                        row=row + 1,
                        query=query,
                        response=responses[query],
                        mount_type=normalize_mount_type(raw_mount),
                    )
                )
            bar.update(len(chunk))
            progress = BatchProgress(processed=len(items), total=total, unique_queries=len(memo))
            if on_progress is not None:
                on_progress(progress)
            await asyncio.sleep(0)

    if accessories is not None:
        items = pair_mounts_for_batch(accessories, items, specs)
    logger.info("Batch finished: %d/%d queries, %d unique", len(items), total, len(memo))
    return items, progress


def run_batch_search(
    engine: SearchEngine,
    queries: Sequence[str],
    **kwargs,
) -> tuple[list[BatchItem], BatchProgress]:
    """Synchronous entry point; runs run_batch_search_async with asyncio.run."""
    return asyncio.run(run_batch_search_async(engine, queries, **kwargs))
