"""Mel-frequency cepstral coefficients of a sampled signal.

The pipeline is pre-emphasis, framing, weighting window, real FFT, a bank of
triangular filters on the mel scale, log energies, a DCT and liftering.
"""

from __future__ import annotations

import math
import os
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from enum import IntEnum
from pathlib import Path
from typing import Union

from algokit.fft import RealFFT

__all__ = [
    "ENERGY_FLOOR",
    "Window",
    "Parameters",
    "Features",
    "hz_to_mel",
    "mel_to_hz",
    "round_half",
    "pre_emphasis",
    "frame_signal",
    "window_weights",
    "mel_indices",
    "filterbank",
    "dct_matrix",
    "lifter_weights",
    "mfcc",
    "save_features",
    "read_features",
]

PathLike = Union[str, "os.PathLike[str]"]

ENERGY_FLOOR = 1.0
"""Band energies below this value are raised to it."""


class Window(IntEnum):
    """Weighting window applied to each frame."""

    RECTANGULAR = 0
    HAMMING = 1
    HANNING = 2
    BLACKMAN = 3

    @classmethod
    def from_code(cls, code: int) -> Window:
        """The window for a numeric code; unknown codes mean rectangular."""
        try:
            return cls(code)
        except ValueError:
            return cls.RECTANGULAR


_OPTION = re.compile(r"-(.) *([^ ]*)")
_INT_PREFIX = re.compile(r"\s*[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")

_FLOAT_OPTIONS = {
    "k": "emphasis",
    "l": "frame_length",
    "d": "frame_shift",
    "i": "freq_min",
    "u": "freq_max",
}
_INT_OPTIONS = {"w": "window", "b": "fft_points"}
_SHORT_OPTIONS = {"n": "n_filters", "p": "n_ceps", "r": "n_lifter"}


def _scan_int(text: str) -> int | None:
    match = _INT_PREFIX.match(text)
    return int(match.group()) if match else None


def _scan_float(text: str) -> float | None:
    match = _FLOAT_PREFIX.match(text)
    return float(match.group()) if match else None


@dataclass
class Parameters:
    """Settings of the feature extraction."""

    emphasis: float = 0.95
    frame_length: float = 32.0
    frame_shift: float = 16.0
    window: Window = Window.HAMMING
    n_filters: int = 24
    freq_min: float = 300.0
    freq_max: float = 3400.0
    fft_points: int = 512
    n_ceps: int = 13
    n_lifter: int = 22

    @classmethod
    def parse(cls, text: str) -> Parameters:
        """Defaults overridden by options such as ``"-k 0.97 -l 25 -n 20"``.

        Options: -k pre-emphasis, -l frame length (ms), -d frame shift (ms),
        -w window code, -n filters, -i lower and -u upper frequency (Hz),
        -b FFT length, -p cepstral coefficients, -r lifter. Unknown options
        and values that do not parse are ignored.
        """
        params = cls()
        for match in _OPTION.finditer(text):
            option, value = match.group(1), match.group(2)
            if option in _FLOAT_OPTIONS:
                number = _scan_float(value)
                if number is not None:
                    setattr(params, _FLOAT_OPTIONS[option], number)
            elif option in _INT_OPTIONS:
                integer = _scan_int(value)
                if integer is not None:
                    if option == "w":
                        params.window = Window.from_code(integer)
                    else:
                        setattr(params, _INT_OPTIONS[option], integer)
            elif option in _SHORT_OPTIONS:
                integer = _scan_int(value)
                if integer is not None:
                    setattr(params, _SHORT_OPTIONS[option], integer & 0xFFFF)
        return params


@dataclass
class Features:
    """A sequence of feature vectors of equal length."""

    vectors: list[list[float]] = field(default_factory=list)
    dimension: int = 0

    def __len__(self) -> int:
        return len(self.vectors)


def hz_to_mel(hz: float) -> float:
    """Frequency in Hz to the mel scale."""
    return 1127.0 * math.log(1.0 + hz / 700.0)


def mel_to_hz(mel: float) -> float:
    """Mel value back to Hz."""
    return 700.0 * (math.exp(mel / 1127.0) - 1.0)


def round_half(x: float) -> int:
    """Round to the nearest integer; exact halves go down."""
    up = math.ceil(x)
    down = math.floor(x)
    return int(up) if up - x < x - down else int(down)


def pre_emphasis(samples: Iterable[float], alpha: float) -> list[float]:
    """Return ``y[0] = x[0]`` and ``y[i] = x[i] - alpha * x[i-1]``."""
    values = [float(v) for v in samples]
    if not values:
        return []
    return values[:1] + [cur - prev * alpha for prev, cur in zip(values, values[1:])]


def frame_signal(
    samples: Sequence[float],
    sample_rate: int,
    frame_length_ms: float,
    frame_shift_ms: float,
) -> list[list[float]]:
    """Cut ``samples`` into complete overlapping frames."""
    size = int(sample_rate * frame_length_ms / 1000.0)
    shift = int(sample_rate * frame_shift_ms / 1000.0)
    if size <= 0 or shift <= 0:
        raise ValueError(f"frame size {size} and shift {shift} must both be positive")
    values = [float(v) for v in samples]
    if len(values) < size:
        return []
    return [values[start : start + size] for start in range(0, len(values) - size + 1, shift)]


def window_weights(kind: Window | int, size: int) -> list[float]:
    """Weights of the window ``kind`` over ``size`` points."""
    window = Window.from_code(int(kind))
    if size <= 0:
        raise ValueError(f"window size must be positive, got {size}")
    points = range(size)
    if window is Window.HAMMING:
        return [0.54 - 0.46 * math.cos(2.0 * math.pi * i / size) for i in points]
    if window in (Window.HANNING, Window.BLACKMAN) and size < 2:
        raise ValueError(f"{window.name.lower()} window needs at least 2 points")
    if window is Window.HANNING:
        return [0.5 - 0.5 * math.cos(2.0 * math.pi * i / (size - 1)) for i in points]
    if window is Window.BLACKMAN:
        return [
            0.42
            - 0.5 * math.cos(2.0 * math.pi * (i / (size - 1)))
            + 0.08 * math.cos(4.0 * math.pi * (i / (size - 1)))
            for i in points
        ]
    return [1.0] * size


def mel_indices(n_filters: int, params: Parameters, sample_rate: int) -> list[int]:
    """Spectrum bin boundaries of ``n_filters`` triangular filters (``n_filters + 2`` values)."""
    fmin = params.freq_min / sample_rate
    fmax = params.freq_max / sample_rate
    if fmax <= fmin:
        fmax = 0.5
    if not (0.0 <= fmin <= 0.5 and 0.0 <= fmax <= 0.5):
        raise ValueError(f"invalid frequency range [{fmin}, {fmax}]")

    half = params.fft_points // 2 - 1
    low_mel = hz_to_mel(fmin * sample_rate)
    high_mel = hz_to_mel(fmax * sample_rate)
    step = (high_mel - low_mel) / (n_filters + 1)
    scale = half * 2.0 / sample_rate

    indices = [round_half(2 * fmin * half)]
    mel = low_mel
    for _ in range(n_filters):
        mel += step
        indices.append(round_half(mel_to_hz(mel) * scale))
    indices.append(round_half(2 * fmax * half))
    return indices


def filterbank(
    spectrum: Sequence[float],
    indices: Sequence[int],
    n_filters: int,
    power_spectrum: bool,
    use_log: bool,
) -> list[float]:
    """Energy of each triangular band of a transform laid out as by ``RealFFT``."""
    if len(indices) < n_filters + 2:
        raise ValueError(f"{n_filters} filters need {n_filters + 2} indices, got {len(indices)}")
    size = len(spectrum)

    def magnitude(j: int) -> float:
        if j:
            re_part = spectrum[j]
            im_part = spectrum[size - j]
            power = re_part * re_part + im_part * im_part
            return power if power_spectrum else math.sqrt(power)
        dc = spectrum[0]
        return dc * dc if power_spectrum else abs(dc)

    energies = []
    for low, centre, high in zip(indices, indices[1:], indices[2 : n_filters + 2]):
        total = 0.0
        slope = 1.0 / (centre - low + 1)
        for j in range(low, centre):
            total += magnitude(j) * (1.0 - slope * (centre - j))
        slope = 1.0 / (high - centre + 1)
        for j in range(centre, high + 1):
            total += magnitude(j) * (1.0 - slope * (j - centre))
        floored = max(total, ENERGY_FLOOR) if total >= ENERGY_FLOOR else ENERGY_FLOOR
        energies.append(math.log(floored) if use_log else floored)
    return energies


def dct_matrix(n_in: int, n_out: int) -> list[list[float]]:
    """Unscaled DCT-II kernel rows for coefficients 1..n_out over ``n_in`` inputs."""
    if n_in <= 0 or n_out <= 0:
        raise ValueError(f"DCT sizes must be positive, got {n_in} and {n_out}")
    return [
        [math.cos(math.pi * (i + 1.0) * (j + 0.5) / n_in) for j in range(n_in)]
        for i in range(n_out)
    ]


def lifter_weights(lifter: int, n: int) -> list[float]:
    """Sinusoidal lifter ``1 + lifter/2 * sin((i+1) * pi / lifter)``."""
    if lifter == 0:
        raise ValueError("lifter must be non-zero")
    return [1.0 + 0.5 * lifter * math.sin((i + 1) * math.pi / lifter) for i in range(n)]


def mfcc(
    samples: Sequence[float], sample_rate: int, params: Parameters | None = None
) -> Features:
    """MFCC feature vectors of ``samples``, one per frame."""
    params = params if params is not None else Parameters()
    fft = RealFFT(params.fft_points)
    indices = mel_indices(params.n_filters, params, sample_rate)
    kernel = dct_matrix(params.n_filters, params.n_ceps)
    scale = math.sqrt(2.0 / params.n_filters)
    lifter = lifter_weights(params.n_lifter, params.n_ceps)

    emphasized = pre_emphasis(samples, params.emphasis)
    frames = frame_signal(emphasized, sample_rate, params.frame_length, params.frame_shift)
    vectors: list[list[float]] = []
    if frames:
        weights = window_weights(params.window, len(frames[0]))
        for frame in frames:
            spectrum = fft.transform(v * w for v, w in zip(frame, weights))
            energies = filterbank(spectrum, indices, params.n_filters, False, True)
            cepstrum = [sum(e * k for e, k in zip(energies, row)) * scale for row in kernel]
            vectors.append([c * w for c, w in zip(cepstrum, lifter)])
    return Features(vectors, params.n_ceps)


def save_features(features: Features, path: PathLike) -> None:
    """Write a count/dimension header and one line per vector."""
    lines = [f"{len(features.vectors)}\t{features.dimension}"]
    lines.extend("".join(f"{value:8f} " for value in vector) for vector in features.vectors)
    Path(path).write_text("\n".join(lines) + "\n")


def read_features(path: PathLike) -> Features:
    """Read vectors written by ``save_features``."""
    tokens = Path(path).read_text().split()
    if len(tokens) < 2:
        raise ValueError(f"{path}: missing header")
    count, dimension = int(tokens[0]), int(tokens[1])
    if count < 0 or dimension < 0:
        raise ValueError(f"{path}: negative sizes in header")
    values = [float(token) for token in tokens[2 : 2 + count * dimension]]
    if len(values) < count * dimension:
        raise ValueError(f"{path}: expected {count * dimension} values, found {len(values)}")
    vectors = [values[start : start + dimension] for start in range(0, count * dimension, dimension)]
    return Features(vectors if dimension else [[] for _ in range(count)], dimension)