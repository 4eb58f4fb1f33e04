"""
main.py — Sorting Algorithm Visualizer Flask App
==================================================
The web server that powers the visualizer.

Routes:
  GET  /                        – main UI
  GET  /api/state               – latest frame (bars, markers, stats) for polling
  GET  /api/algorithms          – registry metadata
  GET  /api/algorithms/<key>    – info card + pseudocode panels for one algorithm
  POST /api/generate            – new random array (optional size)
  POST /api/reset               – restore the values from before the last run
  POST /api/load                – use caller-supplied values
  POST /api/run                 – start animating an algorithm
  POST /api/config/speed        – pacing speed 1–10 (clamped)
  POST /api/config/size         – array size 5–100 (clamped)
  POST /api/compare             – record two algorithms on the current values

State management:
  One AnimationController + one FrameRenderer per app, built by
  create_app().  A run executes on a background thread; every other
  route only reads the frame.  Mutating routes answer 409 while a run
  is active.
"""

from flask import Flask, render_template_string, request, jsonify
import logging
import os
import sys
from typing import Optional

# add project root to path so imports work
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from algorithms import get_algorithm, list_algorithms
from engine import AnimationController, Recorder, compare
from logging_config import setup_logging, level_from_env
from ui import (
    FrameRenderer,
    render_bars,
    sequence_controls,
    algorithm_buttons,
    stats_panel,
    algorithm_info_card,
    comparison_panel,
    pseudocode_viewer,
    explanation_panel,
)


logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Request Helpers
# ---------------------------------------------------------------------------
def _json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _int_arg(data: dict, key: str, default: int) -> int:
    """Integer from the JSON body; anything unparsable falls back to `default`."""
    try:
        return int(data.get(key, default))
    except (TypeError, ValueError):
        return default


def _busy():
    return jsonify({"error": "A sort is already running"}), 409


# ---------------------------------------------------------------------------
# App Factory
# ---------------------------------------------------------------------------
def create_app(
    controller: Optional[AnimationController] = None,
    renderer: Optional[FrameRenderer] = None,
    run_in_thread: bool = True,
) -> Flask:
    """
    Build the Flask app around one controller.

    Args:
        controller    : Pre-built controller (its renderer should be `renderer`).
        renderer      : FrameRenderer the controller reports to.
        run_in_thread : Run sorts on a background thread.  Tests pass False
                        so /api/run returns after the run has finished.
    """
    app = Flask(__name__)

    if renderer is None:
        renderer = controller.renderer if controller is not None else FrameRenderer()
    if controller is None:
        controller = AnimationController(renderer=renderer)

    app.extensions["sortvis"] = {"controller": controller, "renderer": renderer}

    def state_payload() -> dict:
        frame = renderer.frame()
        info = get_algorithm(frame["algo_key"]) if frame["algo_key"] else None
        return {
            **frame,
            "running":     controller.is_running,
            "speed":       controller.speed,
            "size":        controller.size,
            "svg":         render_bars(frame["values"], frame["markers"]),
            "stats_html":  stats_panel(frame["stats"]),
            "pseudocode":  pseudocode_viewer(
                pseudocode_lines=info.pseudocode if info else [],
                current_line=frame["pseudocode_line"],
                algo_label=info.label if info else "",
            ),
            "explanation": explanation_panel(frame["explanation"]),
        }

    # -----------------------------------------------------------------------
    # Main UI Route
    # -----------------------------------------------------------------------
    @app.route("/")
    def index():
        frame = renderer.frame()
        algos = list_algorithms()
        selected = get_algorithm(frame["algo_key"]) if frame["algo_key"] else algos[0]

        html = render_template_string(INDEX_TEMPLATE,
            svg=render_bars(frame["values"], frame["markers"]),
            controls=sequence_controls(controller.size, controller.speed, disabled=controller.is_running),
            algo_buttons=algorithm_buttons(
                algos, active_key=controller.active_algorithm, disabled=controller.is_running,
            ),
            stats=stats_panel(frame["stats"]),
            info=algorithm_info_card(selected),
            comparison=comparison_panel(),
            compare_options=[(a.key, a.label) for a in algos],
            pseudocode=pseudocode_viewer(selected.pseudocode, -1, selected.label),
            explanation=explanation_panel(),
        )
        return html

    # -----------------------------------------------------------------------
    # API: State & Metadata
    # -----------------------------------------------------------------------
    @app.route("/api/state", methods=["GET"])
    def api_state():
        return jsonify(state_payload())

    @app.route("/api/algorithms", methods=["GET"])
    def api_algorithms():
        return jsonify({"algorithms": [a.to_dict() for a in list_algorithms()]})

    @app.route("/api/algorithms/<key>", methods=["GET"])
    def api_algorithm(key):
        info = get_algorithm(key)
        if info is None:
            return jsonify({"error": f"Unknown algorithm: {key}"}), 404
        return jsonify({
            **info.to_dict(),
            "info_html":  algorithm_info_card(info),
            "pseudocode": pseudocode_viewer(info.pseudocode, -1, info.label),
        })

    # -----------------------------------------------------------------------
    # API: Sequence
    # -----------------------------------------------------------------------
    @app.route("/api/generate", methods=["POST"])
    def api_generate():
        data = _json_body()
        size = _int_arg(data, "size", controller.size) if "size" in data else None
        if not controller.generate(size):
            return _busy()
        return jsonify(state_payload())

    @app.route("/api/reset", methods=["POST"])
    def api_reset():
        if not controller.reset():
            return _busy()
        return jsonify(state_payload())

    @app.route("/api/load", methods=["POST"])
    def api_load():
        values = _json_body().get("values")
        if not isinstance(values, list) or not all(
            isinstance(v, int) and not isinstance(v, bool) and v >= 0 for v in values
        ):
            return jsonify({"error": "values must be a list of non-negative integers"}), 400
        if not controller.load(values):
            return _busy()
        return jsonify(state_payload())

    # -----------------------------------------------------------------------
    # API: Run
    # -----------------------------------------------------------------------
    @app.route("/api/run", methods=["POST"])
    def api_run():
        algo_key = _json_body().get("algorithm", "")
        info = get_algorithm(algo_key)
        if info is None:
            return jsonify({"error": f"Unknown algorithm: {algo_key}"}), 400
        if controller.is_running:
            return _busy()

        if run_in_thread:
            if controller.start(info.key) is None:
                return _busy()
        else:
            controller.run(info.key)

        payload = state_payload()
        payload["algorithm"] = info.key
        return jsonify(payload), 202 if run_in_thread else 200

    # -----------------------------------------------------------------------
    # API: Config Changes
    # -----------------------------------------------------------------------
    @app.route("/api/config/speed", methods=["POST"])
    def api_config_speed():
        speed = controller.set_speed(_int_arg(_json_body(), "speed", controller.speed))
        return jsonify({"speed": speed, "delay_ms": controller.delay_ms()})

    @app.route("/api/config/size", methods=["POST"])
    def api_config_size():
        size = controller.set_size(_int_arg(_json_body(), "size", controller.size))
        return jsonify({"size": size, **state_payload()})

    # -----------------------------------------------------------------------
    # API: Comparison Mode
    # -----------------------------------------------------------------------
    @app.route("/api/compare", methods=["POST"])
    def api_compare():
        data = _json_body()
        values = controller.snapshot if controller.is_running else controller.values
        recorders = []
        for side in ("left", "right"):
            rec = Recorder()
            try:
                rec.start(data.get(side, ""), values or [])
            except ValueError as e:
                return jsonify({"error": str(e)}), 400
            rec.run_to_completion()
            recorders.append(rec)

        result = compare(*recorders)
        return jsonify({"comparison": result.to_dict(), "html": comparison_panel(result)})

    return app


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Sorting Algorithm Visualizer</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500;700&family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-teal: #06b6d4;
      --accent-emerald: #10b981;
      --glow-cyan: rgba(14, 165, 233, 0.4);
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    #sidebar {
      width: 340px;
      background: linear-gradient(180deg, var(--bg-dark) 0%, var(--bg-darker) 100%);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    #main { flex: 1; display: flex; flex-direction: column; }

    #canvas-container {
      flex: 1;
      display: flex;
      align-items: center;
      justify-content: center;
      border-bottom: 1px solid var(--border);
    }

    #canvas-svg { max-width: 100%; max-height: 100%; }

    #bottom-panel {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 20px;
      padding: 20px;
      background: var(--bg-dark);
      min-height: 280px;
      max-height: 360px;
      overflow: hidden;
    }

    #pseudocode-container, #explanation-container {
      display: flex;
      flex-direction: column;
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 20px;
      overflow: hidden;
    }

    #pseudocode-container h3, #explanation-container h3 {
      font-size: 14px;
      text-transform: uppercase;
      margin-bottom: 16px;
      color: var(--accent-cyan);
    }

    .code-block {
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      padding: 16px;
      overflow-y: auto;
      font-family: 'JetBrains Mono', 'Courier New', monospace;
      font-size: 13px;
      line-height: 1.6;
      white-space: pre;
    }

    .code-line { padding: 2px 12px; border-radius: 6px; }

    .code-line.highlight {
      background: linear-gradient(90deg, rgba(6, 182, 212, 0.15) 0%, transparent 100%);
      border-left: 3px solid var(--accent-cyan);
      box-shadow: 0 0 20px var(--glow-cyan);
    }

    .explanation-text { color: var(--text-secondary); line-height: 1.8; font-size: 14px; }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
    }

    .panel h3 {
      font-size: 13px;
      margin-bottom: 14px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
    }

    .button-row, .algo-grid { display: flex; flex-wrap: wrap; gap: 8px; margin-top: 12px; }

    button {
      background: linear-gradient(135deg, var(--accent-cyan), var(--accent-teal));
      color: #fff;
      border: none;
      padding: 10px 16px;
      border-radius: 8px;
      cursor: pointer;
      font-size: 13px;
      font-weight: 600;
      font-family: 'DM Sans', sans-serif;
    }

    button:disabled { opacity: 0.4; cursor: not-allowed; }
    button.active { background: linear-gradient(135deg, var(--accent-emerald), #059669); }
    .btn-secondary { background: var(--bg-darker); border: 1px solid var(--border); }

    select, input[type="range"] { width: 100%; margin: 6px 0; }

    label {
      display: block;
      margin: 10px 0 4px;
      font-size: 12px;
      color: var(--text-secondary);
      text-transform: uppercase;
    }

    table { width: 100%; font-size: 13px; margin-top: 8px; }
    table td { padding: 6px 4px; }
    table td:last-child {
      text-align: right;
      color: var(--accent-cyan);
      font-family: 'JetBrains Mono', monospace;
    }

    ul { margin: 10px 0 0 18px; font-size: 13px; color: var(--text-secondary); }
    .placeholder { font-size: 13px; color: var(--text-secondary); }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="controls">{{ controls|safe }}</div>
    <div id="algo-buttons">{{ algo_buttons|safe }}</div>
    <div id="stats">{{ stats|safe }}</div>
    <div id="algorithm-info">{{ info|safe }}</div>
    <div class="panel">
      <h3>⚖️ Compare</h3>
      <select id="compare-left">
        {% for key, label in compare_options %}<option value="{{ key }}">{{ label }}</option>{% endfor %}
      </select>
      <select id="compare-right">
        {% for key, label in compare_options %}<option value="{{ key }}" {% if loop.index == 2 %}selected{% endif %}>{{ label }}</option>{% endfor %}
      </select>
      <button id="compare-btn" class="btn-secondary">Compare on this array</button>
    </div>
    <div id="comparison">{{ comparison|safe }}</div>
  </div>

  <div id="main">
    <div id="canvas-container">
      <div id="canvas-svg">{{ svg|safe }}</div>
    </div>

    <div id="bottom-panel">
      <div id="pseudocode-container">
        <h3>Pseudocode</h3>
        <div id="pseudocode">{{ pseudocode|safe }}</div>
      </div>
      <div id="explanation-container">
        <h3>Current Step</h3>
        <div id="explanation">{{ explanation|safe }}</div>
      </div>
    </div>
  </div>

  <script>
    let lastVersion = -1;
    let polling = null;

    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data || {}),
      });
      return await res.json();
    }

    function setDisabled(disabled) {
      document.querySelectorAll('.algo-btn, #generate-btn, #reset-btn, #compare-btn')
        .forEach(btn => btn.disabled = disabled);
    }

    function paint(state) {
      if (!state || state.version === undefined) return;
      if (state.version !== lastVersion) {
        lastVersion = state.version;
        document.getElementById('canvas-svg').innerHTML = state.svg;
        document.getElementById('stats').innerHTML = state.stats_html;
        if (state.algo_key) {
          document.getElementById('pseudocode').innerHTML = state.pseudocode;
          document.getElementById('explanation').innerHTML = state.explanation;
        }
      }
      setDisabled(state.running);
      document.querySelectorAll('.algo-btn').forEach(btn =>
        btn.classList.toggle('active', state.running && btn.dataset.algorithm === state.algo_key));
      if (!state.running && polling) {
        clearInterval(polling);
        polling = null;
      }
    }

    async function poll() {
      const res = await fetch('/api/state');
      paint(await res.json());
    }

    function startPolling() {
      if (!polling) polling = setInterval(poll, 50);
    }

    document.getElementById('array-size')?.addEventListener('input', async (e) => {
      document.getElementById('size-value').textContent = e.target.value;
      paint(await post('/api/config/size', {size: +e.target.value}));
    });

    document.getElementById('speed')?.addEventListener('input', async (e) => {
      document.getElementById('speed-value').textContent = e.target.value;
      await post('/api/config/speed', {speed: +e.target.value});
    });

    document.getElementById('generate-btn')?.addEventListener('click', async () => {
      paint(await post('/api/generate', {size: +document.getElementById('array-size').value}));
    });

    document.getElementById('reset-btn')?.addEventListener('click', async () => {
      paint(await post('/api/reset'));
    });

    document.querySelectorAll('.algo-btn').forEach(btn => {
      btn.addEventListener('click', async () => {
        const key = btn.dataset.algorithm;
        const meta = await (await fetch('/api/algorithms/' + key)).json();
        document.getElementById('algorithm-info').innerHTML = meta.info_html;
        document.getElementById('pseudocode').innerHTML = meta.pseudocode;
        const state = await post('/api/run', {algorithm: key});
        paint(state);
        if (state.running) startPolling();
      });
    });

    document.getElementById('compare-btn')?.addEventListener('click', async () => {
      const data = await post('/api/compare', {
        left: document.getElementById('compare-left').value,
        right: document.getElementById('compare-right').value,
      });
      if (data.html) document.getElementById('comparison').innerHTML = data.html;
    });

    poll();
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
def serve() -> None:
    setup_logging(level_from_env())

    host = os.environ.get("SORTVIS_HOST", "127.0.0.1")
    port = int(os.environ.get("SORTVIS_PORT", "5000"))

    logger.info("Sorting Algorithm Visualizer on http://%s:%d", host, port)
    create_app().run(host=host, port=port, threaded=True)


if __name__ == "__main__":
    serve()
