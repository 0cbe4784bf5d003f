"""Chart generation for the homepage coding statistics.

Renders the weekly coding-hours bar chart and the language breakdown pie
chart as PNG images, coloured for the requested theme.
"""

import io
from dataclasses import dataclass

import matplotlib
import matplotlib.pyplot as plt

from portfolio.core.stats import DailyCodingEntry, LanguageShare
from portfolio.core.theme import ThemeState

# Use non-interactive backend for server environments
matplotlib.use("Agg")

FONT_FAMILY = "monospace"

BAR_COLOR = "#808080"
BAR_EDGE_COLOR = "#4A4A4A"


@dataclass(frozen=True)
class ChartPalette:
    """Colours for one theme."""

    background: str
    text: str
    grid: str
    slice_border: str
    slices: tuple[str, ...]


PALETTES: dict[ThemeState, ChartPalette] = {
    ThemeState.LIGHT: ChartPalette(
        background="#FFFFFF",
        text="#333333",
        grid="#E0E0E0",
        slice_border="#4A4A4A",
        slices=("#262626", "#404040", "#595959", "#737373", "#8c8c8c", "#a6a6a6"),
    ),
    ThemeState.DARK: ChartPalette(
        background="#000000",
        text="#FFFFFF",
        grid="#666666",
        slice_border="#FFFFFF",
        slices=("#ffffff", "#d6d6d6", "#bdbdbd", "#a3a3a3", "#8a8a8a", "#757575"),
    ),
}


def get_palette(theme: ThemeState) -> ChartPalette:
    return PALETTES[theme]


def slice_colors(theme: ThemeState, count: int) -> list[str]:
    """Colours for ``count`` pie slices, cycling through the theme's greys."""
    slices = PALETTES[theme].slices
    return [slices[i % len(slices)] for i in range(count)]


def _render(fig: plt.Figure) -> bytes:
    plt.tight_layout()
    buffer = io.BytesIO()
    fig.savefig(buffer, format="png", facecolor=fig.get_facecolor(), edgecolor="none")
    plt.close(fig)
    buffer.seek(0)
    return buffer.read()


def _no_data(ax: plt.Axes, palette: ChartPalette) -> None:
    ax.text(
        0.5,
        0.5,
        "No data available",
        ha="center",
        va="center",
        transform=ax.transAxes,
        fontsize=12,
        color=palette.text,
        family=FONT_FAMILY,
    )
    ax.set_axis_off()


async def generate_coding_hours_chart(
    entries: list[DailyCodingEntry],
    theme: ThemeState = ThemeState.LIGHT,
    title: str = "Last 7 Days",
) -> bytes:
    """Bar chart of hours spent coding per day.

    Args:
        entries: Daily entries in display order.
        theme: Theme whose palette is used.
        title: Chart title.

    Returns:
        PNG image as bytes.
    """
    palette = get_palette(theme)
    fig, ax = plt.subplots(figsize=(10, 5), dpi=100)
    fig.patch.set_facecolor(palette.background)
    ax.set_facecolor(palette.background)

    if not entries:
        _no_data(ax, palette)
    else:
        labels = [entry.label for entry in entries]
        hours = [entry.hours for entry in entries]
        ax.bar(
            labels,
            hours,
            color=BAR_COLOR,
            edgecolor=BAR_EDGE_COLOR,
            linewidth=1,
            label="Hours Spent Coding (Last 7 Days)",
        )
        ax.set_ylim(bottom=0)
        ax.set_xlabel("Days", fontsize=14, color=palette.text, family=FONT_FAMILY)
        ax.set_ylabel("Hours", fontsize=14, color=palette.text, family=FONT_FAMILY)
        ax.tick_params(colors=palette.text)
        ax.grid(color=palette.grid, axis="y")
        ax.set_axisbelow(True)
        for spine in ax.spines.values():
            spine.set_color(palette.grid)
        legend = ax.legend(loc="upper right", fontsize=10, frameon=False)
        for text in legend.get_texts():
            text.set_color(palette.text)

    ax.set_title(
        title,
        fontsize=16,
        fontweight="bold",
        color=palette.text,
        family=FONT_FAMILY,
    )
    return _render(fig)


async def generate_language_chart(
    shares: list[LanguageShare],
    theme: ThemeState = ThemeState.LIGHT,
    title: str = "Language Breakdown by Percentage (%)",
) -> bytes:
    """Pie chart of coding time per language.

    Args:
        shares: Language shares, largest first.
        theme: Theme whose palette is used.
        title: Chart title.

    Returns:
        PNG image as bytes.
    """
    palette = get_palette(theme)
    fig, ax = plt.subplots(figsize=(4, 4), dpi=100)
    fig.patch.set_facecolor(palette.background)
    ax.set_facecolor(palette.background)

    if not shares:
        _no_data(ax, palette)
    else:
        ax.pie(
            [share.percent for share in shares],
            colors=slice_colors(theme, len(shares)),
            wedgeprops={"edgecolor": palette.slice_border, "linewidth": 1},
            startangle=90,
            counterclock=False,
        )
        ax.axis("equal")

    ax.set_title(
        title,
        fontsize=11,
        fontweight="bold",
        color=palette.text,
        family=FONT_FAMILY,
    )
    return _render(fig)
