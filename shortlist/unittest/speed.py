from time import perf_counter
from unittest.case import skip
import os
from shortlist.validation import check_option

SPEED_TESTS = (
    check_option(
        "SPEED_TESTS", os.getenv("SPEED_TESTS"), ["OFF", "ON"], ignore_list=[None, ""]
    )
    or "OFF"
)
"""
Specifies whether to run speed tests. Possible values are 'ON' or 'OFF'. Defaults to 'OFF'.
"""

SPEED_XTIME = float(os.getenv("SPEED_XTIME", 1.5))
"""
Multiple used to carry speed checks using ``runtime<XTIME*nominal_runtime``.
"""


def speed_tests_on():
    return SPEED_TESTS == "ON"


def speed_test(func):
    """
    Unit test decorator used to indicate whether the test is a speed test (possibly requiring specific hardware).
    """
    if not speed_tests_on():
        return skip(f"Speed tests disabled (set SPEED_TESTS='ON').")(func)
    return func


class Timer:
    """
    Measures the wall time of a ``with`` block.

    .. code-block::

        with Timer() as timer:
            ...
        print(timer.elapsed)
    """

    elapsed = None

    def __enter__(self):
        self._t0 = perf_counter()
        return self

    def __exit__(self, *args):
        self.elapsed = perf_counter() - self._t0


def assert_faster(fast: Timer, nominal: Timer, xtime: float = None):
    """
    Raises an :exc:`AssertionError` unless ``fast.elapsed < xtime*nominal.elapsed``.

    :param xtime: Defaults to :attr:`SPEED_XTIME`.
    """
    xtime = SPEED_XTIME if xtime is None else xtime
    if not fast.elapsed < xtime * nominal.elapsed:
        raise AssertionError(
            f"Expected runtime {fast.elapsed:.4g}s < {xtime}*{nominal.elapsed:.4g}s."
        )
