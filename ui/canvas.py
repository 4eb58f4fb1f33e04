"""
canvas.py — SVG Bar Renderer
==============================
Pure rendering function: values + markers → SVG string.

The renderer consumes:
  • values   – the sequence (one bar per value)
  • markers  – {index: {marker, …}}  (comparing / swapping / sorted)
  • config   – visual config (canvas size, colors, fonts, …)

And produces an SVG string ready to inject into the DOM.

Design decisions:
  - NO mutation.  The caller passes in everything it needs and gets a
    string back.
  - Bar height is proportional to value / max(values).
  - When a bar carries several markers, the most "active" one wins:
    swapping > comparing > sorted.
"""

from typing import Dict, Iterable, List, Optional

from sequence import BarState


# ---------------------------------------------------------------------------
# Visual Config: color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 900
    height: int = 360
    bg:     str = "#0d1117"
    padding: int = 20

    # bar colors (marker → fill)
    bar_colors: Dict[str, str] = {
        "default":   "#0ea5e9",   # cyan blue
        "comparing": "#f59e0b",   # amber
        "swapping":  "#f43f5e",   # rose
        "sorted":    "#10b981",   # emerald
    }

    # bars
    plot_height:     int = 300     # tallest bar, px
    min_bar_width:   int = 8
    bar_gap:         int = 2
    bar_radius:      int = 2

    # value labels (only drawn when bars are wide enough)
    label_min_width: int = 22
    label_color:     str = "#e6edf3"
    label_size:      int = 10


CONFIG = CanvasConfig()

# which marker wins when several apply to one bar
MARKER_PRIORITY: List[str] = [
    BarState.SWAPPING.value,
    BarState.COMPARING.value,
    BarState.SORTED.value,
]


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_bars(
    values: List[int],
    markers: Optional[Dict[int, Iterable[str]]] = None,
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an SVG string.

    Args:
        values  : Bar heights.
        markers : Optional {index: marker names} for highlighted bars.
        config  : Visual config.
    """
    markers = markers or {}

    svg_parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    if not values:
        svg_parts.append(
            f'<text x="{config.width // 2}" y="{config.height // 2}" text-anchor="middle" '
            f'font-size="14" font-family="\'DM Sans\', sans-serif" fill="#7d8590">Empty sequence</text>'
        )
        svg_parts.append("</svg>")
        return "\n".join(svg_parts)

    max_value = max(values) or 1
    n = len(values)
    slot = max(config.min_bar_width, (config.width - 2 * config.padding) / n)
    bar_width = max(1.0, slot - config.bar_gap)
    baseline = config.height - config.padding

    for idx, value in enumerate(values):
        svg_parts.append(
            _render_bar(idx, value, max_value, slot, bar_width, baseline, markers.get(idx, ()), config)
        )

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


def bar_state(marks: Iterable[str]) -> str:
    """Pick the displayed marker for one bar."""
    marks = set(marks)
    for name in MARKER_PRIORITY:
        if name in marks:
            return name
    return BarState.DEFAULT.value


# ---------------------------------------------------------------------------
# Bar Rendering
# ---------------------------------------------------------------------------
def _render_bar(
    idx: int,
    value: int,
    max_value: int,
    slot: float,
    bar_width: float,
    baseline: float,
    marks: Iterable[str],
    config: CanvasConfig,
) -> str:
    state = bar_state(marks)
    fill = config.bar_colors.get(state, config.bar_colors["default"])

    h = (value / max_value) * config.plot_height
    x = config.padding + idx * slot
    y = baseline - h

    parts = [
        f'<g class="bar {state}" data-index="{idx}" data-value="{value}">',
        f'  <rect x="{x:.2f}" y="{y:.2f}" width="{bar_width:.2f}" height="{h:.2f}" '
        f'rx="{config.bar_radius}" fill="{fill}"/>',
    ]
    if bar_width >= config.label_min_width:
        parts.append(
            f'  <text x="{x + bar_width / 2:.2f}" y="{y - 4:.2f}" text-anchor="middle" '
            f'font-size="{config.label_size}" font-family="\'JetBrains Mono\', monospace" '
            f'fill="{config.label_color}">{value}</text>'
        )
    parts.append('</g>')
    return "\n".join(parts)
