import pytest

from ltlr.easing import (
    Easer,
    ease_in_out_quad,
    ease_in_quad,
    ease_linear,
    ease_out_quad,
)


def test_curve_endpoints():
    assert ease_linear(0.0) == pytest.approx(0.0)
    assert ease_linear(1.0) == pytest.approx(1.0)
    assert ease_in_quad(0.0) == pytest.approx(0.0)
    assert ease_in_quad(1.0) == pytest.approx(1.0)
    assert ease_out_quad(0.0) == pytest.approx(0.0)
    assert ease_out_quad(1.0) == pytest.approx(1.0)
    assert ease_in_out_quad(0.0) == pytest.approx(0.0)
    assert ease_in_out_quad(1.0) == pytest.approx(1.0)


def test_in_out_quad_is_symmetric():
    assert ease_in_out_quad(0.5) == pytest.approx(0.5)
    for x in (0.1, 0.25, 0.4):
        assert ease_in_out_quad(x) + ease_in_out_quad(1 - x) == pytest.approx(1.0)


def test_in_below_and_out_above_linear():
    for x in (0.1, 0.3, 0.7, 0.9):
        assert ease_in_quad(x) < ease_linear(x) < ease_out_quad(x)


def test_easer_starts_at_zero():
    easer = Easer(ease_in_quad, 2.0)
    assert easer.value == 0.0
    assert not easer.is_done()


def test_easer_halfway_linear():
    easer = Easer(ease_linear, 2.0)
    easer.update(1.0)
    assert easer.value == pytest.approx(0.5)
    assert not easer.is_done()


def test_easer_clamps_at_duration():
    easer = Easer(ease_out_quad, 1.0)
    easer.update(0.6)
    easer.update(0.6)
    assert easer.elapsed == 1.0
    assert easer.is_done()
    assert easer.value == pytest.approx(1.0)


def test_easer_lerp():
    easer = Easer(ease_linear, 1.0)
    assert easer.lerp(10.0, 20.0) == 10.0
    assert easer.lerp_precise(10.0, 20.0) == 10.0
    easer.update(1.0)
    assert easer.lerp(10.0, 20.0) == pytest.approx(20.0)
    assert easer.lerp_precise(10.0, 20.0) == pytest.approx(20.0)


def test_easer_reset():
    easer = Easer(ease_linear, 1.0)
    easer.update(5.0)
    easer.reset()
    assert easer.elapsed == 0.0
    assert easer.value == 0.0
    assert not easer.is_done()