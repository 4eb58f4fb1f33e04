"""
ui/
---
Presentation layer.

    from ui import render_bars, FrameRenderer
    from ui import sequence_controls, algorithm_buttons, …
"""

from ui.canvas import render_bars, CanvasConfig
from ui.frame  import FrameRenderer

from ui.controls import (
    sequence_controls,
    algorithm_buttons,
    stats_panel,
    algorithm_info_card,
    comparison_panel,
    pseudocode_viewer,
    explanation_panel,
)

__all__ = [
    "render_bars",
    "CanvasConfig",
    "FrameRenderer",
    "sequence_controls",
    "algorithm_buttons",
    "stats_panel",
    "algorithm_info_card",
    "comparison_panel",
    "pseudocode_viewer",
    "explanation_panel",
]
