"""리포트 생성 모듈."""

from repolens.reports.markdown import (
    BarChartItem,
    primary_language,
    render_bar_chart,
    render_report,
)

__all__ = ["BarChartItem", "primary_language", "render_bar_chart", "render_report"]
