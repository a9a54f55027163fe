"""Section timer that charges elapsed clock ticks to named sections."""

from __future__ import annotations

import math
import time
from typing import Any, Callable, Iterable

UNCOUNTED = "uncounted"


class SectionTimer:
    """Accumulates time spent in named sections of a loop."""

    def __init__(
        self,
        names: Iterable[str],
        clock: Callable[[], int] = time.perf_counter_ns,
        frequency: float = 1_000_000_000,
    ) -> None:
        self.names: list[str] = [*names, UNCOUNTED]
        self.times: dict[str, int] = {name: 0 for name in self.names}
        self.current = UNCOUNTED
        self._clock = clock
        self._frequency = frequency
        self._then: int | None = None

    def _check(self, name: str) -> None:
        if name not in self.times:
            raise KeyError(name)

    def _charge_current(self) -> int:
        now = self._clock()
        if self._then is None:
            self._then = now
        self.times[self.current] += now - self._then
        self._then = now
        return now

    def switch(self, name: str) -> None:
        """Charge elapsed time to the current section, then start timing name."""
        self._check(name)
        self._charge_current()
        self.current = name

    def time_call(self, name: str, func: Callable[..., Any], *args: Any, **kwargs: Any) -> Any:
        """Call func, charging its run time to name; return what it returns."""
        self._check(name)
        self._charge_current()
        result = func(*args, **kwargs)
        now = self._clock()
        self.times[name] += now - self._then
        self.current = UNCOUNTED
        self._then = now
        return result

    def report(self, show_all: bool = False) -> str:
        """One line per section: seconds, share of total and name."""
        total = sum(self.times.values())
        lines = []
        for name in self.names:
            ticks = self.times[name]
            secs = ticks / self._frequency
            pct = 100.0 * ticks / total if total else math.nan
            if (show_all and secs > 0.0) or pct >= 0.1 or secs >= 0.01:
                lines.append(f"{secs:6.1f}  {pct:2.0f}%  {name}\n")
        return "".join(lines)