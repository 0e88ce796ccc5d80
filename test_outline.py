"""Tests for the final outline pipeline."""

import math
import random

import pytest

from pressure_ink.outline import (
    ClosePath,
    MoveTo,
    PathBuilder,
    QuadraticCurveTo,
    Resampler,
    assign_directions,
    build_outline,
    build_stroke_outline,
    estimate_pressures,
    resample,
    smooth_pressures,
)
from pressure_ink.utils.geometry import Point, Sample, get_distance


def random_stroke(seed=3, count=80):
    rng = random.Random(seed)
    samples = []
    x, y, t = 100.0, 100.0, 0.0
    for _ in range(count):
        samples.append(Sample(x, y, t))
        x += rng.uniform(-4, 12)
        y += rng.uniform(-8, 8)
        t += rng.choice([0, 8, 16, 17])
    return samples


def test_resample_keeps_spaced_points():
    samples = [Sample(x, 0, x) for x in range(21)]
    kept = resample(samples, stroke_width=30)
    assert [s.x for s in kept] == [0, 5, 10, 15, 20]
    assert [s.time for s in kept] == [0, 5, 10, 15, 20]
    assert Resampler(30).get_compression_ratio(samples, kept) == pytest.approx(21 / 5)


def test_resample_always_keeps_last_sample():
    samples = [Sample(x, 0, x) for x in range(18)]
    kept = resample(samples, stroke_width=30)
    assert [s.x for s in kept] == [0, 5, 10, 15, 17]


def test_resample_spacing_property():
    stroke_width = 24
    kept = resample(random_stroke(), stroke_width)
    for a, b in zip(kept[:-2], kept[1:-1]):
        assert get_distance(a, b) >= stroke_width / 6


def test_resample_degenerate_and_copies():
    assert resample([], 30) == []
    single = [Sample(1, 1, 0)]
    kept = resample(single, 30)
    assert len(kept) == 1
    kept[0].pressure = 0.1
    assert single[0].pressure == 0.5


def test_resampler_rejects_bad_width():
    with pytest.raises(ValueError):
        Resampler(0)


def test_offline_pressure_collinear_constant_speed():
    samples = [Sample(0, 0, 0), Sample(10, 0, 1), Sample(20, 0, 2)]
    pressures = smooth_pressures(estimate_pressures(samples, 5))
    assert pressures[1] == pytest.approx(pressures[0])
    assert pressures[2] == pytest.approx(pressures[1])
    assert pressures[1] == pytest.approx(0.1)


def test_offline_pressure_band():
    samples = resample(random_stroke(seed=11), 30)
    pressures = estimate_pressures(samples, 5)
    assert len(pressures) == len(samples)
    assert pressures[0] == pressures[1]
    assert all(0.1 <= p <= 0.9 for p in pressures)


def test_offline_pressure_slow_segment_is_heaviest():
    pressures = estimate_pressures([Sample(0, 0, 0), Sample(10, 0, 1000)], 5)
    assert list(pressures) == pytest.approx([0.9, 0.9])


def test_offline_pressure_single_point():
    assert list(estimate_pressures([Sample(0, 0, 0)], 5)) == [0]
    assert len(estimate_pressures([], 5)) == 0


def test_smoothing_shrinks_window_at_ends():
    smoothed = smooth_pressures([0, 0, 0, 0, 3])
    assert list(smoothed) == pytest.approx([0, 0, 0.6, 0.75, 1.0])


def test_smoothing_constant_sequence_is_identity():
    assert list(smooth_pressures([0.3] * 7)) == pytest.approx([0.3] * 7)


def test_smoothing_stays_within_window_bounds():
    rng = random.Random(5)
    values = [rng.uniform(0.1, 0.9) for _ in range(40)]
    smoothed = smooth_pressures(values, half_window=2)
    for i, value in enumerate(smoothed):
        window = values[max(0, i - 2):min(len(values), i + 3)]
        assert min(window) - 1e-12 <= value <= max(window) + 1e-12


def test_directions_look_forward_then_back():
    samples = assign_directions([Sample(0, 0), Sample(10, 0), Sample(10, 10)])
    assert samples[0].direction == pytest.approx(0.0)
    assert samples[1].direction == pytest.approx(0.0)
    assert samples[2].direction == pytest.approx(math.pi / 2)


def test_path_builder_two_point_outline():
    samples = assign_directions([Sample(0, 0, pressure=1), Sample(10, 0, pressure=1)])
    path = PathBuilder(10, is_pressure_brush=True).build(samples)
    commands = path.commands
    assert len(commands) == 5
    assert isinstance(commands[0], MoveTo)
    assert (commands[0].x, commands[0].y) == pytest.approx((10, -5))

    expected_curves = [(0, -5, 0, 0), (0, 5, 5, 5), (15, 0, 10, -5)]
    for command, expected in zip(commands[1:4], expected_curves):
        assert isinstance(command, QuadraticCurveTo)
        assert (command.cx, command.cy, command.x, command.y) == pytest.approx(expected, abs=1e-9)
    assert isinstance(commands[4], ClosePath)


def test_fixed_width_ignores_pressure():
    samples = assign_directions([Sample(0, 0, pressure=p) for p in (0.1, 0.5, 0.9)])
    samples[1].x, samples[2].x = 10, 20
    assign_directions(samples)
    builder = PathBuilder(16, is_pressure_brush=False)
    assert [builder.rail_radius(s) for s in samples] == [8, 8, 8]

    vertices = builder.boundary(samples)
    centers = list(reversed(samples)) + samples
    for vertex, center in zip(vertices, centers):
        assert get_distance(vertex, center) == pytest.approx(8)


def test_pressure_width_and_bad_pressure():
    builder = PathBuilder(20)
    assert builder.rail_radius(Sample(0, 0, pressure=0.5)) == 5
    assert builder.rail_radius(Sample(0, 0, pressure=math.nan)) == 0
    assert builder.rail_radius(Sample(0, 0, pressure=-1)) == 0


def test_path_builder_rejects_bad_width():
    with pytest.raises(ValueError):
        PathBuilder(-3)


def test_outline_is_closed_loop():
    path = build_stroke_outline(random_stroke(), stroke_width=30)
    assert path.is_closed
    assert path.start_point == pytest.approx(path.end_point)
    polygon = path.flatten(steps=4)
    assert polygon[0] == pytest.approx(polygon[-1])


def test_outline_is_deterministic():
    samples = random_stroke(seed=21)
    first = build_stroke_outline(samples, 18, is_pressure_brush=True)
    second = build_stroke_outline(samples, 18, is_pressure_brush=True)
    assert first.commands == second.commands


def test_outline_leaves_caller_samples_alone():
    samples = random_stroke()
    before = [(s.x, s.y, s.time, s.pressure, s.direction) for s in samples]
    build_stroke_outline(samples, 30)
    assert [(s.x, s.y, s.time, s.pressure, s.direction) for s in samples] == before


def test_outline_offset_translates_path():
    samples = random_stroke()
    plain = build_stroke_outline(samples, 30)
    shifted = build_stroke_outline(samples, 30, offset=Point(5, -5))
    x0, y0 = plain.start_point
    x1, y1 = shifted.start_point
    assert (x1 - x0, y1 - y0) == pytest.approx((5, -5))


def test_degenerate_strokes_give_empty_path():
    assert build_stroke_outline([], 30).is_empty
    path = build_stroke_outline([Sample(1, 1, 0)], 30)
    assert path.is_empty
    assert not path.is_closed
    assert path.start_point is None
    assert path.flatten() == []


def test_tap_still_produces_a_closed_dot():
    path = build_stroke_outline([Sample(1, 1, 0), Sample(1, 1, 16)], 30)
    assert path.is_closed
    assert all(math.isfinite(c.x) for c in path.commands if not isinstance(c, ClosePath))


def test_build_outline_from_ready_samples():
    samples = assign_directions([Sample(0, 0, pressure=0.5), Sample(0, 20, pressure=0.5)])
    path = build_outline(samples, stroke_width=8)
    assert path.is_closed
    assert len(list(path)) == 5
