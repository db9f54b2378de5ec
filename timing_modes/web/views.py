from __future__ import annotations

import io
from typing import Optional

from flask import Blueprint, current_app, jsonify, request, send_file

from ..easing import UnknownEasingError, curve_names, get_easing
from ..renderer import render_curve
from ..sampling import sample_curve
from ..types import PlotConfig, finite_or_none


bp = Blueprint("views", __name__)


def _int_arg(key: str, default: int) -> Optional[int]:
    raw = request.args.get(key)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return None


def _unknown(exc: UnknownEasingError):
    current_app.logger.info("unknown curve requested: %s", exc.name)
    return jsonify({"error": str(exc)}), 404


@bp.route("/api/curves")
def list_curves():
    return jsonify({"curves": curve_names()})


@bp.route("/api/curves/<name>")
def curve_samples(name: str):
    steps = _int_arg("steps", current_app.config["DEFAULT_STEPS"])
    if steps is None or not 2 <= steps <= current_app.config["MAX_STEPS"]:
        return jsonify({"error": f"steps must be between 2 and {current_app.config['MAX_STEPS']}"}), 400
    try:
        samples = sample_curve(name, steps)
    except UnknownEasingError as exc:
        return _unknown(exc)
    return jsonify(samples.to_json())


@bp.route("/api/curves/<name>/eval")
def curve_eval(name: str):
    x = request.args.get("x", type=float)
    if x is None:
        return jsonify({"error": "query parameter 'x' must be a number"}), 400
    try:
        fn = get_easing(name)
    except UnknownEasingError as exc:
        return _unknown(exc)
    return jsonify({"name": name, "progress": finite_or_none(x), "value": finite_or_none(fn(x))})


@bp.route("/plot/<name>.png")
def curve_plot(name: str):
    max_size = current_app.config["MAX_PLOT_SIZE"]
    width = _int_arg("width", 640)
    height = _int_arg("height", 360)
    if width is None or height is None or width > max_size or height > max_size:
        return jsonify({"error": f"width and height must be integers no larger than {max_size}"}), 400
    try:
        config = PlotConfig(width=width, height=height)
    except ValueError as exc:
        return jsonify({"error": str(exc)}), 400
    try:
        samples = sample_curve(name, current_app.config["PLOT_STEPS"])
    except UnknownEasingError as exc:
        return _unknown(exc)
    buf = io.BytesIO()
    render_curve(samples, config).save(buf, format="PNG")
    buf.seek(0)
    return send_file(buf, mimetype="image/png")
