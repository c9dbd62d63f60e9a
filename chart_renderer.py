"""
Reference chart renderer using matplotlib with a seaborn theme.
Draws the engine's ChartData as PNG images; it only consumes series and
bounds and never interprets the raw grid itself.
"""

import io
import logging
from typing import Optional

import matplotlib.pyplot as plt
import seaborn as sns
import warnings

import config
from chart_engine import ChartData
from error_handler import RenderError, handle_chart_error
from series_builder import ChartMode

logger = logging.getLogger('statchart.chart_renderer')

# Set matplotlib to use non-interactive backend
plt.switch_backend('Agg')

# Suppress matplotlib categorical units warning
warnings.filterwarnings('ignore', category=UserWarning, module='matplotlib.category')


class ChartRenderer:
    """Renders ChartData as bar, line, pie or doughnut images."""

    COLORS = {
        'background': '#FFFFFF',
        'foreground': '#374151',
        'title': '#1E3A8A',
        'grid': '#E5E7EB',
        'zero_line': '#374151',
    }

    # Series (or slice) colours, cycled by index
    CHART_PALETTE = [
        '#1E3A8A',  # navy
        '#3B82F6',  # blue
        '#10B981',  # green
        '#F59E0B',  # orange
        '#EF4444',  # red
        '#8B5CF6',  # purple
        '#EC4899',  # pink
        '#22C55E',  # light green
    ]

    DOUGHNUT_WIDTH = 0.45

    def __init__(self):
        """Initialize the chart renderer."""
        sns.set_theme(style="whitegrid")
        plt.rcParams.update({
            'figure.facecolor': self.COLORS['background'],
            'axes.facecolor': self.COLORS['background'],
            'axes.labelcolor': self.COLORS['foreground'],
            'text.color': self.COLORS['foreground'],
            'xtick.color': self.COLORS['foreground'],
            'ytick.color': self.COLORS['foreground'],
            'grid.color': self.COLORS['grid'],
        })

    @classmethod
    def color_for(cls, index: int) -> str:
        return cls.CHART_PALETTE[index % len(cls.CHART_PALETTE)]

    def render(self, chart_data: ChartData, title: Optional[str] = None,
               height_px: Optional[int] = None) -> Optional[io.BytesIO]:
        """
        Render chart data to a PNG buffer.

        Args:
            chart_data: Output of ``chart_engine.build_chart``
            title: Optional chart title
            height_px: Target height in pixels; width keeps a 5:3 ratio

        Returns:
            PNG buffer positioned at 0, or None for an empty chart or a
            rendering failure
        """
        if chart_data.is_empty:
            logger.warning("Nothing to render for %s chart (empty series set)", chart_data.mode)
            return None

        try:
            return self._generate_chart_file(chart_data, title, height_px)
        except Exception as e:
            logger.error("Error generating %s chart: %s", chart_data.mode, e, exc_info=True)
            return None

    def _generate_chart_file(self, chart_data: ChartData, title: Optional[str],
                             height_px: Optional[int]) -> io.BytesIO:
        height_in = (height_px or config.default_chart_height) / 100
        fig, ax = plt.subplots(figsize=(height_in * 5 / 3, height_in))
        try:
            if chart_data.mode == ChartMode.BAR:
                self._draw_bar_chart(ax, chart_data)
            elif chart_data.mode == ChartMode.LINE:
                self._draw_line_chart(ax, chart_data)
            elif ChartMode.is_proportion(chart_data.mode):
                self._draw_proportion_chart(ax, chart_data)
            else:
                raise RenderError(f"Unknown chart type: {chart_data.mode}")

            if title:
                ax.set_title(title, fontsize=16, fontweight='bold', color=self.COLORS['title'], pad=16)

            fig.tight_layout()
            buf = io.BytesIO()
            fig.savefig(buf, format='png', dpi=config.render_dpi, facecolor=self.COLORS['background'])
            buf.seek(0)
            return buf
        finally:
            plt.close(fig)

    def _apply_value_axis(self, ax, chart_data: ChartData):
        """Apply the engine's bounds and emphasise the zero line."""
        bounds = chart_data.bounds
        if bounds is not None and not bounds.is_auto:
            ax.set_ylim(bounds.min, bounds.max)
        ax.axhline(0, color=self.COLORS['zero_line'], linewidth=2.5, zorder=1)

    def _set_category_ticks(self, ax, labels):
        ax.set_xticks(range(len(labels)))
        ax.set_xticklabels(labels, rotation=45, ha='right')

    def _add_legend(self, ax):
        legend = ax.legend(loc='upper left', frameon=True, fontsize=10)
        legend.get_frame().set_edgecolor(self.COLORS['grid'])

    def _draw_bar_chart(self, ax, chart_data: ChartData):
        """Grouped bars: one bar per series inside each category slot."""
        series_set = chart_data.series_set
        labels = series_set.category_labels
        group_width = 0.8
        bar_width = group_width / len(series_set.series)

        for idx, series in enumerate(series_set.series):
            offset = -group_width / 2 + bar_width * (idx + 0.5)
            ax.bar(
                [pos + offset for pos in range(len(labels))],
                series.values,
                width=bar_width,
                color=self.color_for(idx),
                label=series.label,
                zorder=2,
            )

        self._set_category_ticks(ax, labels)
        self._apply_value_axis(ax, chart_data)
        self._add_legend(ax)

    def _draw_line_chart(self, ax, chart_data: ChartData):
        """One line per series over the category positions."""
        frame = chart_data.series_set.to_dataframe()
        positions = range(len(frame.index))

        for idx in range(frame.shape[1]):
            ax.plot(
                positions,
                frame.iloc[:, idx].tolist(),
                color=self.color_for(idx),
                linewidth=2.5,
                marker='o',
                markersize=6,
                label=frame.columns[idx],
                zorder=2,
            )

        self._set_category_ticks(ax, list(frame.index))
        self._apply_value_axis(ax, chart_data)
        self._add_legend(ax)

    def _draw_proportion_chart(self, ax, chart_data: ChartData):
        """Pie or doughnut slices for the single proportion series."""
        series = chart_data.series_set.series[0]
        colors = [self.color_for(idx) for idx in range(len(series.values))]

        wedgeprops = {'edgecolor': self.COLORS['background'], 'linewidth': 2}
        if chart_data.mode == ChartMode.DOUGHNUT:
            wedgeprops['width'] = self.DOUGHNUT_WIDTH

        ax.pie(
            series.values,
            labels=chart_data.series_set.category_labels,
            autopct='%1.1f%%',
            startangle=90,
            colors=colors,
            wedgeprops=wedgeprops,
            textprops={'fontsize': 10},
        )
        ax.set_xlabel(series.label)
        ax.axis('equal')


def _empty_render():
    return None


_chart_renderer = None


@handle_chart_error(fallback=_empty_render)
def render_chart(chart_data: ChartData, title: Optional[str] = None,
                 height_px: Optional[int] = None) -> Optional[io.BytesIO]:
    """
    Convenience function to render chart data with a shared renderer.

    Args:
        chart_data: Output of ``chart_engine.build_chart``
        title: Optional chart title
        height_px: Target height in pixels

    Returns:
        PNG buffer or None
    """
    global _chart_renderer
    if _chart_renderer is None:
        _chart_renderer = ChartRenderer()
    return _chart_renderer.render(chart_data, title, height_px)
