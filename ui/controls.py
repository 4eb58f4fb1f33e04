"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • sequence_controls   – size / speed sliders, generate + reset buttons
  • algorithm_buttons   – one button per registered algorithm
  • stats_panel         – comparisons, swaps, writes, elapsed time
  • algorithm_info_card – description, complexity, characteristics
  • comparison_panel    – side-by-side metrics of two recorded runs
  • pseudocode_viewer   – with live line highlighting
  • explanation_panel   – "what just happened" text for the current event

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from html import escape
from typing import Any, Dict, List, Optional

from algorithms import AlgoInfo
from engine import ComparisonResult, MIN_SIZE, MAX_SIZE, MIN_SPEED, MAX_SPEED


# ---------------------------------------------------------------------------
# Sequence Controls
# ---------------------------------------------------------------------------
def sequence_controls(size: int, speed: int, disabled: bool = False) -> str:
    dis = 'disabled' if disabled else ''
    return f"""
    <div class="panel sequence-controls">
      <h3>📊 Array</h3>
      <label>Size: <span id="size-value">{size}</span>
        <input type="range" id="array-size" min="{MIN_SIZE}" max="{MAX_SIZE}" value="{size}">
      </label>
      <label>Speed: <span id="speed-value">{speed}</span>
        <input type="range" id="speed" min="{MIN_SPEED}" max="{MAX_SPEED}" value="{speed}">
      </label>
      <div class="button-row">
        <button id="generate-btn" class="btn-secondary" {dis}>New Array</button>
        <button id="reset-btn" class="btn-secondary" {dis}>Reset</button>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Buttons
# ---------------------------------------------------------------------------
def algorithm_buttons(
    algorithms: List[AlgoInfo],
    active_key: Optional[str] = None,
    disabled: bool = False,
) -> str:
    buttons = []
    for algo in algorithms:
        active = 'active' if algo.key == active_key else ''
        dis = 'disabled' if disabled else ''
        buttons.append(
            f'<button class="algo-btn {active}" data-algorithm="{algo.key}" {dis}>{algo.label}</button>'
        )

    return f"""
    <div class="panel algorithm-buttons">
      <h3>🧠 Algorithm</h3>
      <div class="algo-grid">
        {''.join(buttons)}
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Statistics Panel
# ---------------------------------------------------------------------------
def stats_panel(stats: Optional[Dict[str, Any]] = None) -> str:
    stats = stats or {}
    return f"""
    <div class="panel stats-panel">
      <h3>⏱ Statistics</h3>
      <table>
        <tr><td>Comparisons:</td><td><strong id="comparisons">{stats.get('comparisons', 0)}</strong></td></tr>
        <tr><td>Swaps:</td><td><strong id="swaps">{stats.get('swaps', 0)}</strong></td></tr>
        <tr><td>Writes:</td><td><strong id="writes">{stats.get('writes', 0)}</strong></td></tr>
        <tr><td>Time:</td><td><strong id="time">{stats.get('elapsed_ms', 0):.0f}ms</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Info Card
# ---------------------------------------------------------------------------
def algorithm_info_card(info: Optional[AlgoInfo] = None) -> str:
    if not info:
        return """
        <div class="panel algorithm-info">
          <h3>ℹ️ About</h3>
          <p class="placeholder">Pick an algorithm to see how it works.</p>
        </div>
        """

    items = ''.join(f'<li>{escape(c)}</li>' for c in info.characteristics)
    return f"""
    <div class="panel algorithm-info">
      <h3>ℹ️ {escape(info.label)}</h3>
      <p>{escape(info.description)}</p>
      <table>
        <tr><td>Time:</td><td><strong>{escape(info.complexity_time)}</strong></td></tr>
        <tr><td>Space:</td><td><strong>{escape(info.complexity_space)}</strong></td></tr>
        <tr><td>Stable:</td><td><strong>{'yes' if info.stable else 'no'}</strong></td></tr>
      </table>
      <ul>{items}</ul>
    </div>
    """


# ---------------------------------------------------------------------------
# Comparison Panel (side-by-side)
# ---------------------------------------------------------------------------
def comparison_panel(comp: Optional[ComparisonResult] = None) -> str:
    if not comp:
        return """
        <div class="panel comparison-panel">
          <h3>⚖️ Comparison</h3>
          <p class="placeholder">Compare two algorithms on the current array.</p>
        </div>
        """

    left = comp.left
    right = comp.right

    def winner_badge(winner_label):
        if winner_label == "tie":
            return "🟰 Tie"
        return f"👑 {escape(winner_label)}"

    return f"""
    <div class="panel comparison-panel">
      <h3>⚖️ {escape(left.algo_label)} vs {escape(right.algo_label)}</h3>
      <table class="comparison-table">
        <thead>
          <tr><th>Metric</th><th>{escape(left.algo_label)}</th><th>{escape(right.algo_label)}</th><th>Winner</th></tr>
        </thead>
        <tbody>
          <tr>
            <td>Comparisons</td><td>{left.comparisons}</td><td>{right.comparisons}</td>
            <td>{winner_badge(comp.winner_comparisons)}</td>
          </tr>
          <tr>
            <td>Swaps</td><td>{left.swaps}</td><td>{right.swaps}</td>
            <td>{winner_badge(comp.winner_swaps)}</td>
          </tr>
          <tr>
            <td>Writes</td><td>{left.writes}</td><td>{right.writes}</td><td>—</td>
          </tr>
          <tr>
            <td>Total Steps</td><td>{left.total_events}</td><td>{right.total_events}</td>
            <td>{winner_badge(comp.winner_events)}</td>
          </tr>
        </tbody>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(
    pseudocode_lines: List[str],
    current_line: int = -1,
    algo_label: str = "",
) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div style="color: #7d8590; padding: 20px; text-align: center;">
            Select an algorithm to view pseudocode
          </div>
        </div>
        """

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = 'highlight' if i == current_line else ''
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{escape(line)}</div>')

    return f"""
    <div class="code-block" data-algo="{escape(algo_label)}">
      {''.join(lines_html)}
    </div>
    """


# ---------------------------------------------------------------------------
# Explanation Panel
# ---------------------------------------------------------------------------
def explanation_panel(explanation: str = "") -> str:
    if not explanation:
        return ('<div class="explanation-text">▶ Pick an algorithm to watch it sort the bars '
                'one comparison at a time.</div>')
    return f"""<div class="explanation-text">{escape(explanation)}</div>"""
