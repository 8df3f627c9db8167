# striping.py
"""
Row-stripe parallel driver.

The frame is cut into horizontal stripes. Each stripe is processed
together with `radius` halo rows above and below it, so every core row
sees exactly the neighbours it would see in a full-frame pass; only the
core rows are copied back. Output matches pipeline.process byte for byte.
"""

import logging
import math
import os
import time
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional

from boundary import ProcessResult, validate
from pipeline import get_engine, process
from settings import CHANNELS, DEFAULT_BLUR_RADIUS, DEFAULT_ENGINE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Stripe:
    core_y0: int    # first core row (inclusive)
    core_y1: int    # last core row (exclusive)
    halo_top: int
    halo_bot: int

    @property
    def core_height(self) -> int:
        return self.core_y1 - self.core_y0

    @property
    def sub_height(self) -> int:
        return self.halo_bot - self.halo_top

    @property
    def core_offset(self) -> int:
        """Row of the first core line inside the halo sub-image."""
        return self.core_y0 - self.halo_top


def make_stripe_plan(height: int, threads: int, radius: int) -> List[Stripe]:
    if threads < 1:
        raise ValueError(f"threads must be >= 1 (got {threads})")
    rows_per = math.ceil(height / threads)
    plan = []
    for t in range(threads):
        y0 = t * rows_per
        y1 = min(height, (t + 1) * rows_per)
        if y0 >= y1:
            break
        plan.append(Stripe(y0, y1, max(0, y0 - radius), min(height, y1 + radius)))
    return plan


def _run_stripe(view, output: bytearray, stripe: Stripe, width: int, radius: int, engine: str) -> None:
    stride = width * CHANNELS
    sub = view[stripe.halo_top * stride:stripe.halo_bot * stride]
    sub_out = bytearray(len(sub))
    process(sub, sub_out, width, stripe.sub_height, radius, engine)

    start = stripe.core_offset * stride
    core = sub_out[start:start + stripe.core_height * stride]
    output[stripe.core_y0 * stride:stripe.core_y1 * stride] = core


def process_striped(
    image_buffer,
    width: int,
    height: int,
    blur_radius: int = DEFAULT_BLUR_RADIUS,
    threads: Optional[int] = None,
    engine: str = DEFAULT_ENGINE,
) -> ProcessResult:
    """Same contract as boundary.process_image, spread over a thread pool."""
    view = validate(image_buffer, width, height, blur_radius)
    width, height, blur_radius = int(width), int(height), int(blur_radius)
    get_engine(engine)
    if threads is None:
        threads = os.cpu_count() or 1
    plan = make_stripe_plan(height, threads, blur_radius)
    output = bytearray(view.nbytes)

    logger.info("Processing %dx%d image in %d stripes (blur radius: %d, engine: %s)",
                width, height, len(plan), blur_radius, engine)
    start = time.perf_counter()
    with ThreadPoolExecutor(max_workers=len(plan)) as pool:
        jobs = [pool.submit(_run_stripe, view, output, s, width, blur_radius, engine) for s in plan]
        for job in jobs:
            job.result()
    duration_ms = int((time.perf_counter() - start) * 1000)
    logger.info("Completed in %d ms", duration_ms)

    return ProcessResult(output, duration_ms)
