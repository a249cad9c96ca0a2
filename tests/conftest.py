"""Pytest configuration and fixtures."""

import pytest

from regionlayout import DisplayMetrics, Layout, reset_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Keep cached settings and REGIONLAYOUT_ env vars from leaking between tests."""
    monkeypatch.delenv("REGIONLAYOUT_STAGE_WIDTH", raising=False)
    monkeypatch.delenv("REGIONLAYOUT_STAGE_HEIGHT", raising=False)
    monkeypatch.delenv("REGIONLAYOUT_STATUS_BAR_HEIGHT", raising=False)
    reset_settings()
    yield
    reset_settings()


@pytest.fixture
def portrait_metrics():
    """Portrait display: 1000x2000 content units, 100 unit status bar, 2 units per pixel."""
    return DisplayMetrics(
        stage_width=1000.0,
        stage_height=2000.0,
        pixel_width=500,
        pixel_height=1000,
        status_bar_height=100.0,
    )


@pytest.fixture
def landscape_metrics(portrait_metrics):
    """The portrait display turned on its side."""
    return portrait_metrics.rotated()


@pytest.fixture
def unit_metrics():
    """100x100 display without status bar, so stage x_pct == y_pct == 1."""
    return DisplayMetrics(stage_width=100.0, stage_height=100.0, pixel_width=100, pixel_height=100)


@pytest.fixture
def layout(portrait_metrics):
    """Fresh layout on the portrait display."""
    return Layout(portrait_metrics)


@pytest.fixture
def unit_layout(unit_metrics):
    """Fresh layout on the 100x100 display."""
    return Layout(unit_metrics)


def _assert_consistent(region) -> None:
    assert region.width > 0
    assert region.height > 0
    assert region.right - region.left == pytest.approx(region.width)
    assert region.bottom - region.top == pytest.approx(region.height)
    assert region.x_center == pytest.approx((region.left + region.right) / 2)
    assert region.y_center == pytest.approx((region.top + region.bottom) / 2)
    assert region.aspect == pytest.approx(region.width / region.height)
    assert region.is_portrait == (region.aspect <= 1)


@pytest.fixture
def assert_consistent():
    """Check the geometric invariants every region must satisfy."""
    return _assert_consistent

