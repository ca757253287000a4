import pytest

from embedkit.functiongenerator import (
    FunctionGenerator,
    fgsaw,
    fgsin,
    fgsqr,
    fgstr,
    fgtri,
)

PERIOD = 2.0
AMP = 3.0
SHIFT = 0.5


@pytest.fixture
def gen():
    return FunctionGenerator(PERIOD, AMP, 0.0, SHIFT)


def test_sawtooth_starts_at_bottom(gen):
    assert gen.sawtooth(0.0) == pytest.approx(-AMP + SHIFT)


def test_sawtooth_midpoint_is_offset(gen):
    assert gen.sawtooth(PERIOD / 2) == pytest.approx(SHIFT)


def test_square_high_then_low(gen):
    assert gen.square(0.1 * PERIOD) == AMP + SHIFT
    assert gen.square(0.6 * PERIOD) == -AMP + SHIFT


def test_triangle_peak_and_trough(gen):
    assert gen.triangle(0.0) == pytest.approx(-AMP + SHIFT)
    assert gen.triangle(PERIOD / 2) == pytest.approx(AMP + SHIFT)


def test_sinus_quarter_period(gen):
    assert gen.sinus(PERIOD / 4) == pytest.approx(AMP + SHIFT)
    assert gen.sinus(0.0) == pytest.approx(SHIFT)


@pytest.mark.parametrize("name", ["sawtooth", "triangle", "square", "sinus", "stair"])
@pytest.mark.parametrize("t", [0.1, 0.7, 1.3, 1.9])
def test_waveforms_are_periodic(gen, name, t):
    wave = getattr(gen, name)
    assert wave(t + PERIOD) == pytest.approx(wave(t), abs=1e-9)
    assert wave(t + 3 * PERIOD) == pytest.approx(wave(t), abs=1e-9)


def test_stair_has_requested_levels(gen):
    steps = 5
    samples = {round(gen.stair(i * PERIOD / 100, steps), 9) for i in range(100)}
    assert len(samples) == steps
    assert min(samples) == pytest.approx(-AMP + SHIFT)
    assert max(samples) == pytest.approx(AMP + SHIFT)


def test_stair_rejects_too_few_steps(gen):
    with pytest.raises(ValueError):
        gen.stair(0.3, 1)


def test_zero_period_rejected():
    with pytest.raises(ValueError):
        FunctionGenerator(0.0)


def test_configure_changes_period(gen):
    gen.configure(4.0, 1.0, 0.0, 0.0)
    assert gen.square(2.5) == -1.0
    assert gen.square(1.5) == 1.0


def test_phase_shifts_waveform():
    shifted = FunctionGenerator(1.0, 1.0, 0.25, 0.0)
    plain = FunctionGenerator(1.0, 1.0, 0.0, 0.0)
    assert shifted.sawtooth(0.1) == pytest.approx(plain.sawtooth(0.35))


@pytest.mark.parametrize("t", [0.1, 0.3, 0.45])
def test_sawtooth_is_odd(t):
    assert fgsaw(-t) == pytest.approx(-fgsaw(t))


@pytest.mark.parametrize("t", [0.1, 0.3, 0.7])
def test_square_is_odd(t):
    assert fgsqr(-t) == -fgsqr(t)


@pytest.mark.parametrize("t", [0.1, 0.3, 0.7])
def test_triangle_is_even(t):
    assert fgtri(-t) == pytest.approx(fgtri(t))


def test_triangle_duty_cycle_moves_peak():
    assert fgtri(0.25, duty_cycle=0.25) == pytest.approx(1.0)
    assert fgtri(0.0, duty_cycle=0.25) == pytest.approx(-1.0)


def test_square_duty_cycle():
    assert fgsqr(0.2, duty_cycle=0.25) == 1.0
    assert fgsqr(0.3, duty_cycle=0.25) == -1.0


def test_sine_bounded():
    values = [fgsin(i / 50, amplitude=2.0) for i in range(100)]
    assert max(values) <= 2.0
    assert min(values) >= -2.0


def test_stair_negative_mirrors_positive():
    assert fgstr(-0.3, steps=4) == pytest.approx(-fgstr(0.3, steps=4))