# scales.py: domain -> pixel mappings shared by the scenes

import math

from settings import BAND_PADDING, HEIGHT, MARGIN, WIDTH


class LinearScale:
    def __init__(self, domain, range_):
        self.domain = (float(domain[0]), float(domain[1]))
        self.range = (float(range_[0]), float(range_[1]))

    @property
    def degenerate(self) -> bool:
        return self.domain[0] == self.domain[1]

    def __call__(self, value) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range
        if self.degenerate:
            return (r0 + r1) / 2
        return r0 + (float(value) - d0) / (d1 - d0) * (r1 - r0)

    def ticks(self, count: int = 5) -> list[float]:
        lo, hi = sorted(self.domain)
        if lo == hi:
            return [lo]
        step = nice_step((hi - lo) / max(count, 1))
        start = math.ceil(lo / step) * step
        out = []
        v = start
        #small epsilon so float drift doesn't eat the last tick
        while v <= hi + step * 1e-9:
            out.append(round(v, 10))
            v += step
        return out


class BandScale:
    def __init__(self, domain, range_, padding: float = BAND_PADDING):
        self.domain = list(domain)
        self.range = (float(range_[0]), float(range_[1]))
        self.padding = padding

        r0, r1 = self.range
        n = len(self.domain)
        span = r1 - r0
        if n == 0:
            self.step, self.bandwidth, self._start = 0.0, 0.0, r0
        elif n == 1:
            #a single category gets the whole range
            self.step, self.bandwidth, self._start = span, span, r0
        else:
            self.step = span / (n + padding)
            self.bandwidth = self.step * (1 - padding)
            #centre the bands, leaving equal outer padding on both sides
            self._start = r0 + (span - self.step * (n - padding)) / 2
        self._index = {label: i for i, label in enumerate(self.domain)}

    def __call__(self, label):
        i = self._index.get(label)
        if i is None:
            return None
        return self._start + i * self.step

    def center(self, label):
        start = self(label)
        return None if start is None else start + self.bandwidth / 2


def nice_step(raw: float) -> float:
    #round a raw step to 1, 2 or 5 x 10^k
    if raw <= 0:
        return 1.0
    mag = 10 ** math.floor(math.log10(raw))
    for m in (1, 2, 5, 10):
        if raw <= m * mag:
            return m * mag
    return 10 * mag


# -------------------------
# Factories with the shared margin policy
# -------------------------
def x_range():
    return (MARGIN["left"], WIDTH - MARGIN["right"])


def y_range():
    return (HEIGHT - MARGIN["bottom"], MARGIN["top"])


def x_linear(values) -> LinearScale:
    values = list(values)
    return LinearScale((min(values), max(values)), x_range())


def y_linear(max_value) -> LinearScale:
    return LinearScale((0, max_value), y_range())


def x_band(labels, padding: float = BAND_PADDING) -> BandScale:
    return BandScale(labels, x_range(), padding=padding)
