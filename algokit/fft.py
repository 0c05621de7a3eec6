"""In-place split-radix FFT for real input.

The transform of ``n`` real samples is returned as ``n`` reals: index 0 holds
the DC term, index ``k`` for ``1 <= k <= n/2`` the real part of bin ``k`` and
index ``n - k`` for ``1 <= k < n/2`` its imaginary part.
"""

from __future__ import annotations

import math
from collections.abc import Iterable

__all__ = ["RealFFT"]

_RAC2S2 = 0.707106781186547  # cos(pi / 4)


class RealFFT:
    """Real-input FFT of a fixed power-of-two size, with precomputed tables."""

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError(f"cannot initialize FFT with {size} points")
        if size & (size - 1):
            raise ValueError(f"FFT size must be an integer power of 2, got {size}")
        if size < 4:
            raise ValueError(f"FFT size must be at least 4, got {size}")
        self.size = size
        self.order = size.bit_length() - 1
        self._init_tables()

    def _init_tables(self) -> None:
        n = self.size
        m = self.order
        n2 = n >> 1
        n4 = n >> 2
        n6 = n // 6
        n8 = n >> 3
        n12 = n6 >> 1
        n16 = n >> 4

        # w1c[i] = cos(2*pi*i/n) for 0 < i < n/4
        angle = 2.0 * math.pi / n
        c = math.cos(angle)
        s = math.sin(angle)
        w1c = [0.0] * (n4 + 2)
        w1c[0] = 1.0
        w1c[1] = c
        w1c[n4 - 1] = s
        w1c[n8] = _RAC2S2
        for i in range(2, n16 + 1):
            w1c[i] = w1c[i - 1] * c - w1c[n4 - i + 1] * s
            w1c[n4 - i] = w1c[n4 - i + 1] * c + w1c[i - 1] * s
            w1c[n8 + i - 1] = w1c[n8 + i - 2] * c - w1c[n8 - i + 2] * s
            w1c[n8 - i + 1] = w1c[n8 - i + 2] * c + w1c[n8 + i - 2] * s

        # w3c[i] = cos(3 * 2*pi*i/n)
        w3c = [0.0] * (n4 + 2)
        w3c[0] = 1.0
        for i in range(1, n12 + 1):
            w3c[i] = w1c[3 * i]
        for i in range(n12 + 1, n6 + 1):
            w3c[i] = -w1c[n2 - 3 * i]
        for i in range(n6 + 1, n4):
            w3c[i] = -w1c[3 * i - n2]

        # starting offsets of the butterfly blocks
        jx0 = [0] * (n // 3 + 5)
        jx0[3] = n2
        jx0[4] = 3 * n4
        ip = 5
        nb = 3
        lnb = 1
        for _ in range(1, m - 3):
            for j in range(nb):
                jx0[ip + j] = jx0[ip - nb + j] >> 1
            ip += nb
            for j in range(lnb):
                jx0[ip + j] = jx0[ip - nb - nb - lnb + j] // 4 + n2
                jx0[ip + j + lnb] = jx0[ip + j] + n4
            ip += lnb + lnb
            llnb = lnb
            lnb = nb
            nb = lnb + llnb + llnb

        self._w1c = w1c
        self._w3c = w3c
        self._jx0 = jx0

    def transform(self, data: Iterable[float]) -> list[float]:
        """Return the transform of ``data``, zero-padded to the FFT size."""
        values = [float(v) for v in data]
        if len(values) > self.size:
            raise ValueError(f"{len(values)} samples do not fit an FFT of size {self.size}")
        x = values + [0.0] * (self.size - len(values))
        self._bit_reverse(x)
        self._butterflies(x)
        return x

    def _bit_reverse(self, x: list[float]) -> None:
        m = self.order
        n = 1 << m
        m1 = m >> 1
        n1 = 1 << m1
        ia1 = n1 >> 1
        ia2 = n // n1
        ia3 = ia1 + ia2
        nh = n // 2
        b = (m - m1 - m1) * n1

        for ipair in range(0, b + 1, n1):
            ibr = 0
            x[ipair + ia1], x[ipair + ia2] = x[ipair + ia2], x[ipair + ia1]
            for i in range(1 + ipair, ia1 + ipair):
                k = nh
                while k <= ibr:
                    ibr -= k
                    k //= 2
                ibr += k
                a, c = ibr + i + ia1, ibr + i + ia2
                x[a], x[c] = x[c], x[a]
                jbr = 0
                if m < 4:
                    continue
                for j in range(ibr + ipair, ibr + i):
                    jbri = jbr + i
                    x[jbri], x[j] = x[j], x[jbri]
                    x[jbri + ia1], x[j + ia2] = x[j + ia2], x[jbri + ia1]
                    x[jbri + ia2], x[j + ia1] = x[j + ia1], x[jbri + ia2]
                    x[jbri + ia3], x[j + ia3] = x[j + ia3], x[jbri + ia3]
                    k = nh
                    while k <= jbr:
                        jbr -= k
                        k //= 2
                    jbr += k

    def _butterflies(self, x: list[float]) -> None:
        m = self.order
        jx0 = self._jx0
        w1c = self._w1c
        w3c = self._w3c
        n = 1 << m
        nd4 = n >> 2
        sgn = 1 if m % 2 == 0 else -1
        nb = (n // 2 + sgn) // 3
        lnb = (n - sgn) // 3
        ib = n // 6

        # length-4 butterflies
        for i in range(ib, ib + nb):
            i0 = jx0[i]
            i1, i2, i3 = i0 + 1, i0 + 2, i0 + 3
            r1 = x[i0] + x[i1]
            t0 = x[i2] + x[i3]
            x[i3] = x[i3] - x[i2]
            x[i1] = x[i0] - x[i1]
            x[i2] = r1 - t0
            x[i0] = r1 + t0

        llnb = lnb
        lnb = nb
        nb = (llnb - lnb) // 2
        ib -= nb

        # length-8 butterflies
        for i in range(ib, ib + nb):
            i0 = jx0[i]
            i4, i5, i6, i7 = i0 + 4, i0 + 5, i0 + 6, i0 + 7
            r1 = x[i4] - x[i5]
            r3 = x[i4] + x[i5]
            r2 = x[i7] - x[i6]
            r4 = x[i6] + x[i7]
            t0 = r3 + r4
            x[i6] = r4 - r3
            x[i4] = x[i0] - t0
            x[i0] = x[i0] + t0

            t1 = (r1 + r2) * _RAC2S2
            t2 = (r2 - r1) * _RAC2S2
            i3 = i0 + 3
            x[i5] = t2 - x[i3]
            x[i7] = t2 + x[i3]
            i1 = i0 + 1
            x[i3] = x[i1] - t1
            x[i1] = x[i1] + t1

        istep = n // 16
        n4 = 2
        n2 = 4
        for _ in range(4, m + 1):
            llnb = lnb
            lnb = nb
            nb = (llnb - lnb) // 2
            ib -= nb
            n8 = n4
            n4 = n2
            n2 = n2 + n2

            for i in range(ib, ib + nb):
                i0 = jx0[i]
                i1 = i0 + n4
                i2 = i1 + n4
                i3 = i2 + n4
                t0 = x[i2] + x[i3]
                x[i3] = -x[i2] + x[i3]
                x[i2] = x[i0] - t0
                x[i0] = x[i0] + t0

                i0 += n8
                i1 = i0 + n4
                i2 = i1 + n4
                i3 = i2 + n4
                t1 = (x[i2] - x[i3]) * _RAC2S2
                t2 = (x[i2] + x[i3]) * _RAC2S2
                x[i2] = -t2 - x[i1]
                x[i3] = -t2 + x[i1]
                x[i1] = x[i0] - t1
                x[i0] = x[i0] + t1

            if n4 < 4:
                continue

            for i in range(ib, ib + nb):
                jstep = 0
                for j in range(1, n8):
                    jstep += istep
                    ia0 = jx0[i] + j

                    ia2 = ia0 + n2
                    ib2 = ia2 + n4 - j - j
                    c2 = x[ia2] * w1c[jstep] + x[ib2] * w1c[nd4 - jstep]
                    d2 = -x[ia2] * w1c[nd4 - jstep] + x[ib2] * w1c[jstep]
                    ia3 = ia2 + n4
                    ib3 = ib2 + n4
                    c3 = x[ia3] * w3c[jstep] - x[ib3] * w3c[nd4 - jstep]
                    d3 = x[ia3] * w3c[nd4 - jstep] + x[ib3] * w3c[jstep]
                    ib1 = ia0 + n4
                    t1 = c2 + c3
                    c3 = c2 - c3
                    x[ib2] = -x[ib1] - c3
                    x[ia3] = x[ib1] - c3
                    t2 = d2 - d3
                    ia1 = ib1 - j - j
                    x[ib1] = x[ia1] + t2
                    x[ia1] = x[ia1] - t2
                    d3 = d2 + d3
                    ib0 = ia1 + n4
                    x[ia2] = -x[ib0] + d3
                    x[ib3] = x[ib0] + d3
                    x[ib0] = x[ia0] - t1
                    x[ia0] = x[ia0] + t1
            istep //= 2