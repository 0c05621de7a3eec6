import math

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.mfcc import (
    ENERGY_FLOOR,
    Features,
    Parameters,
    Window,
    dct_matrix,
    filterbank,
    frame_signal,
    hz_to_mel,
    lifter_weights,
    mel_indices,
    mel_to_hz,
    mfcc,
    pre_emphasis,
    read_features,
    round_half,
    save_features,
    window_weights,
)


def test_parse_empty_gives_defaults():
    assert Parameters.parse("") == Parameters()


def test_parse_overrides_values():
    params = Parameters.parse("-k 0.9 -l 25 -d 10 -n 20 -b 256 -p 12 -r 20 -i 100 -u 4000")
    assert params.emphasis == 0.9
    assert params.frame_length == 25.0
    assert params.frame_shift == 10.0
    assert params.n_filters == 20
    assert params.fft_points == 256
    assert params.n_ceps == 12
    assert params.n_lifter == 20
    assert params.freq_min == 100.0
    assert params.freq_max == 4000.0


def test_parse_value_attached_and_window():
    params = Parameters.parse("-k0.5 -w 3")
    assert params.emphasis == 0.5
    assert params.window is Window.BLACKMAN


def test_parse_ignores_unknown_and_bad_values():
    params = Parameters.parse("-z 5 -n abc -k x")
    assert params == Parameters()


def test_unknown_window_code_is_rectangular():
    assert Parameters.parse("-w 9").window is Window.RECTANGULAR


def test_mel_round_trip_and_zero():
    assert hz_to_mel(0.0) == 0.0
    for hz in (100.0, 1000.0, 3400.0, 8000.0):
        assert mel_to_hz(hz_to_mel(hz)) == pytest.approx(hz)


def test_round_half_goes_down_on_ties():
    assert round_half(2.5) == 2
    assert round_half(-1.5) == -2
    assert round_half(2.6) == round_half(3.4)
    assert round_half(7.0) == 7


def test_pre_emphasis():
    out = pre_emphasis([1.0, 1.0, 1.0, 1.0], 1.0)
    assert out == [1.0, 0.0, 0.0, 0.0]
    assert pre_emphasis([], 0.95) == []


@given(st.lists(st.floats(-1e3, 1e3), min_size=1, max_size=50))
def test_pre_emphasis_zero_alpha_is_identity(values):
    assert pre_emphasis(values, 0.0) == values


def test_frame_signal_overlapping_frames():
    samples = [float(v) for v in range(10)]
    frames = frame_signal(samples, 1000, 4.0, 2.0)
    assert len(frames) == 4
    for position, frame in enumerate(frames):
        assert frame == samples[2 * position : 2 * position + 4]


def test_frame_signal_short_and_invalid():
    assert frame_signal([1.0, 2.0], 1000, 4.0, 2.0) == []
    with pytest.raises(ValueError):
        frame_signal([1.0] * 10, 1000, 0.0, 2.0)


def test_window_weights_shapes():
    assert window_weights(Window.RECTANGULAR, 5) == [1.0] * 5
    hamming = window_weights(Window.HAMMING, 16)
    assert len(hamming) == 16
    for i in range(1, 16):
        assert hamming[i] == pytest.approx(hamming[16 - i])
    hanning = window_weights(Window.HANNING, 9)
    assert hanning[0] == pytest.approx(0.0)
    assert hanning[-1] == pytest.approx(0.0, abs=1e-12)
    blackman = window_weights(Window.BLACKMAN, 11)
    for i in range(11):
        assert blackman[i] == pytest.approx(blackman[10 - i], abs=1e-12)


def test_window_weights_invalid():
    with pytest.raises(ValueError):
        window_weights(Window.HAMMING, 0)
    with pytest.raises(ValueError):
        window_weights(Window.HANNING, 1)


def test_mel_indices_are_ordered():
    params = Parameters()
    indices = mel_indices(params.n_filters, params, 16000)
    assert len(indices) == params.n_filters + 2
    assert indices == sorted(indices)


def test_mel_indices_upper_bound_defaults_to_nyquist():
    params = Parameters(freq_min=300.0, freq_max=100.0)
    indices = mel_indices(10, params, 16000)
    assert indices[-1] == params.fft_points // 2 - 1


def test_mel_indices_invalid_range():
    with pytest.raises(ValueError):
        mel_indices(24, Parameters(freq_max=9000.0), 16000)


def test_filterbank_floor():
    params = Parameters()
    indices = mel_indices(params.n_filters, params, 16000)
    silent = [0.0] * params.fft_points
    assert filterbank(silent, indices, params.n_filters, False, True) == [0.0] * params.n_filters
    assert filterbank(silent, indices, params.n_filters, False, False) == [
        ENERGY_FLOOR
    ] * params.n_filters


def test_filterbank_scales_with_spectrum():
    params = Parameters()
    indices = mel_indices(params.n_filters, params, 16000)
    spectrum = [100.0] * params.fft_points
    doubled = [200.0] * params.fft_points
    base = filterbank(spectrum, indices, params.n_filters, False, False)
    assert filterbank(doubled, indices, params.n_filters, False, False) == pytest.approx(
        [2 * v for v in base]
    )
    base_power = filterbank(spectrum, indices, params.n_filters, True, False)
    assert filterbank(doubled, indices, params.n_filters, True, False) == pytest.approx(
        [4 * v for v in base_power]
    )


def test_filterbank_needs_enough_indices():
    with pytest.raises(ValueError):
        filterbank([0.0] * 16, [0, 1, 2], 3, False, True)


def test_dct_matrix_rows_are_orthogonal():
    kernel = dct_matrix(8, 5)
    assert len(kernel) == 5
    assert all(len(row) == 8 for row in kernel)
    for a in range(5):
        for b in range(a + 1, 5):
            assert sum(x * y for x, y in zip(kernel[a], kernel[b])) == pytest.approx(0.0, abs=1e-9)


def test_dct_matrix_invalid():
    with pytest.raises(ValueError):
        dct_matrix(0, 3)


def test_lifter_weights_symmetric():
    weights = lifter_weights(22, 21)
    assert len(weights) == 21
    for i in range(21):
        assert weights[i] == pytest.approx(weights[20 - i])
    with pytest.raises(ValueError):
        lifter_weights(0, 5)


def test_mfcc_of_silence_is_zero():
    params = Parameters()
    features = mfcc([0.0] * 4000, 16000, params)
    assert features.dimension == params.n_ceps
    assert len(features) == len(frame_signal([0.0] * 4000, 16000, 32.0, 16.0))
    assert all(value == 0.0 for vector in features.vectors for value in vector)


def test_mfcc_of_tone_is_finite_and_deterministic():
    samples = [1000.0 * math.sin(2 * math.pi * 440 * t / 16000) for t in range(8000)]
    first = mfcc(samples, 16000)
    second = mfcc(samples, 16000)
    assert first == second
    assert len(first) == len(frame_signal(samples, 16000, 32.0, 16.0))
    assert all(len(vector) == 13 for vector in first.vectors)
    assert all(math.isfinite(value) for vector in first.vectors for value in vector)
    assert any(value != 0.0 for vector in first.vectors for value in vector)


def test_mfcc_frame_larger_than_fft():
    with pytest.raises(ValueError):
        mfcc([0.0] * 4000, 16000, Parameters(frame_length=64.0))


def test_save_and_read_round_trip(tmp_path):
    features = Features([[1.5, -2.25, 3.0], [0.125, 4.0, -7.5]], 3)
    path = tmp_path / "feat.mfcc"
    save_features(features, path)
    loaded = read_features(path)
    assert loaded.dimension == 3
    assert len(loaded) == 2
    for got, want in zip(loaded.vectors, features.vectors):
        assert got == pytest.approx(want, abs=1e-6)
    assert path.read_text().splitlines()[0] == "2\t3"


def test_read_features_truncated(tmp_path):
    path = tmp_path / "bad.mfcc"
    path.write_text("2\t3\n1.0 2.0\n")
    with pytest.raises(ValueError):
        read_features(path)