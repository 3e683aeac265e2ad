"""
CPU backend for describe().

Runs the whole battery of single-sample statistics over one design and
collects per-statistic failures as warnings instead of failing the call.
"""

from __future__ import annotations

import math
from typing import Any, Callable

from staz.core.exceptions import ErrorKind, StazError
from staz.core.result import Result
from staz.core.timing import Timer
from staz.descriptive import _compose, _order
from staz.descriptive.design import SampleDesign
from staz.descriptive.solution import DescriptiveParams


class CPUDescriptiveBackend:
    """CPU backend computing every descriptive statistic of one sample."""

    @property
    def name(self) -> str:
        return 'cpu_descriptive'

    def solve(self, design: SampleDesign) -> Result[DescriptiveParams]:
        """
        Compute every statistic of ``design``.

        A statistic that raises a StazError or runs out of scratch memory
        is stored as NaN (None for the boxplot) and the failure is reported
        in Result.warnings as
        ``"<statistic>: <ErrorKind value>: <message>"``.
        """
        timer = Timer()
        timer.start()

        x = design.data
        values: dict[str, Any] = {}
        warnings_list: list[str] = []

        def run(field: str, func: Callable[[], Any], failed: Any = math.nan) -> None:
            try:
                values[field] = func()
            except StazError as e:
                values[field] = failed
                warnings_list.append(f"{field}: {e.kind.value}: {e}")
            except MemoryError:
                values[field] = failed
                warnings_list.append(
                    f"{field}: {ErrorKind.ALLOCATION_FAILURE.value}: cannot allocate scratch memory"
                )

        with timer.section('mean_family'):
            run('arithmetic_mean', lambda: _compose.arithmetic_mean(x))
            run('geometric_mean', lambda: _compose.geometric_mean(x))
            run('harmonic_mean', lambda: _compose.harmonic_mean(x))
            run('quadratic_mean', lambda: _compose.quadratic_mean(x))
            run('extremes_mean', lambda: _compose.extremes_mean(x))

        with timer.section('order_statistics'):
            s = _order.sorted_copy(x)
            run('median', lambda: _order.median_sorted(s))
            run('min', lambda: _order.min_value(x))
            run('max', lambda: _order.max_value(x))
            run('trimean', lambda: _compose.trimean(x))
            run('midhinge', lambda: _compose.midhinge(x))
            run('boxplot', lambda: _compose.boxplot(x), failed=None)

        with timer.section('mode'):
            run('mode', lambda: _order.mode(x))

        with timer.section('dispersion'):
            run('variance', lambda: _compose.variance(x))
            run('std_deviation', lambda: _compose.std_deviation(x))
            run('relative_deviation', lambda: _compose.relative_deviation(x))
            run('mad_avg', lambda: _compose.mean_absolute_deviation(x))
            run('mad_med', lambda: _compose.median_absolute_deviation(x))

        with timer.section('ranges'):
            run('range', lambda: _compose.standard_range(x))
            run('interquartile_range', lambda: _compose.interquartile_range(x))
            run('percentile_range', lambda: _compose.percentile_range(x))

        timer.stop()

        params = DescriptiveParams(n=design.n, **values)

        return Result(
            params=params,
            info={
                'n': design.n,
                'n_missing': design.n_missing,
                'computed': sorted(values),
                'failed': sorted(w.split(':', 1)[0] for w in warnings_list),
            },
            timing=timer.result(),
            backend_name=self.name,
            warnings=tuple(warnings_list),
        )
