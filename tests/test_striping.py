"""Row-stripe driver: plan shape and equality with the single pass."""

import pytest

from boundary import process_image
from errors import BufferSizeMismatch
from striping import Stripe, make_stripe_plan, process_striped


class TestStripePlan:
    def test_halo_rows(self):
        plan = make_stripe_plan(10, 3, 2)
        assert plan == [Stripe(0, 4, 0, 6), Stripe(4, 8, 2, 10), Stripe(8, 10, 6, 10)]
        assert [s.core_offset for s in plan] == [0, 2, 2]
        assert [s.sub_height for s in plan] == [6, 8, 4]

    def test_cores_cover_every_row_once(self):
        plan = make_stripe_plan(17, 4, 3)
        rows = [y for s in plan for y in range(s.core_y0, s.core_y1)]
        assert rows == list(range(17))

    def test_no_empty_stripes(self):
        plan = make_stripe_plan(3, 8, 1)
        assert len(plan) == 3
        assert all(s.core_height == 1 for s in plan)

    def test_threads_must_be_positive(self):
        with pytest.raises(ValueError):
            make_stripe_plan(10, 0, 1)


@pytest.mark.parametrize("engine", ["reference", "numpy"])
@pytest.mark.parametrize("threads,radius", [(1, 1), (2, 1), (3, 2), (5, 4), (16, 1)])
def test_matches_single_pass(random_image, engine, threads, radius):
    src = random_image(6, 11)
    single = process_image(src, 6, 11, radius, engine=engine)
    striped = process_striped(src, 6, 11, radius, threads=threads, engine=engine)
    assert striped.data == single.data


def test_default_threads(random_image):
    src = random_image(4, 9)
    assert process_striped(src, 4, 9, 1).data == process_image(src, 4, 9, 1).data


def test_validates_like_process_image():
    with pytest.raises(BufferSizeMismatch):
        process_striped(bytes(10), 2, 2, 1, threads=2)


def test_accepts_numpy_integer_scalars(random_image):
    import numpy as np
    src = random_image(3, 5)
    striped = process_striped(src, np.int64(3), np.int64(5), np.int64(1), threads=2)
    assert striped.data == process_image(src, 3, 5, 1).data
