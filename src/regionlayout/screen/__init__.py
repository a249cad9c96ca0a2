"""Host display metrics."""

from .display_metrics import DisplayMetrics, detect_display_metrics

__all__ = ["DisplayMetrics", "detect_display_metrics"]
