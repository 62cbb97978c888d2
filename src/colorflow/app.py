from __future__ import annotations

import logging
import string
from typing import Any

from flask import Flask, jsonify, request
from werkzeug.exceptions import HTTPException

# Project-local algorithms
from .blend import MIX_MODES, MixMode, all_combinations, blend
from .colors import PALETTE, Color, Hex, to_rgb
from .level import Level, check_level
from .search import SearchLimitExceeded, calculate_min_steps, find_path

# ColorAide
from coloraide import Color as CAColor

log = logging.getLogger(__name__)

MAX_STEPS_LIMIT = 50
MAX_EXPANSIONS = 5000  # colors expanded per search, about a second of work
FIT_HEX = {"method": "clip"}  # blending happens on 8-bit sRGB, so clip into gamut


class InvalidParam(ValueError):
    """A request parameter that cannot be used; answered with HTTP 400."""


def canon_color(s: Any) -> Hex:
    """Symbolic code, 3/6-digit hex, or any CSS color ColorAide understands."""
    raw = (s if isinstance(s, str) else "").strip()
    if not raw:
        raise InvalidParam("empty color")
    if len(raw) == 1:
        if raw.upper() not in PALETTE:
            raise InvalidParam(f"unknown color code '{raw}'")
        return Color.of(raw).hex
    plain = raw.lstrip("#")
    if len(plain) in (3, 6) and all(c in string.hexdigits for c in plain):
        return Color.of(plain).hex
    try:
        parsed = CAColor(raw)
    except ValueError:
        raise InvalidParam(f"invalid color '{raw}'") from None
    hex_ = parsed.convert("srgb").to_string(hex=True, alpha=False, fit=FIT_HEX)
    return Color.of(to_rgb(hex_)).hex


def parse_palette(val: str | None) -> list[Hex]:
    return [canon_color(p) for p in (val or "").split(",") if p.strip()]


def parse_mode(val: str | None) -> MixMode:
    m = (val or "interpolate").strip().lower()
    if m not in MIX_MODES:
        raise InvalidParam(f"unknown mode '{m}'")
    return m  # type: ignore[return-value]


def parse_int(val: str | None, default: int, lo: int, hi: int) -> int:
    if val is None or val == "":
        return default
    try:
        n = int(val)
    except ValueError:
        raise InvalidParam(f"'{val}' is not an integer") from None
    return max(lo, min(n, hi))


def parse_ratio(val: str | None) -> float:
    if val is None or val == "":
        return 0.5
    try:
        r = float(val)
    except ValueError:
        raise InvalidParam(f"'{val}' is not a number") from None
    if not 0.0 <= r <= 1.0:
        raise InvalidParam("ratio must be between 0 and 1")
    return r


def parse_flag(val: str | None, default: bool) -> bool:
    if val is None:
        return default
    return val.strip().lower() in {"1", "true", "yes", "on"}


# ----------------------------- Flask app ----------------------------------


def create_app() -> Flask:
    app = Flask(__name__)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    @app.errorhandler(InvalidParam)
    def invalid_param(exc: InvalidParam):
        body: dict[str, Any] = {"error": str(exc)}
        if str(exc).startswith("unknown mode"):
            body["supported"] = list(MIX_MODES)
        return jsonify(body), 400

    @app.errorhandler(SearchLimitExceeded)
    def search_limit(exc: SearchLimitExceeded):
        log.warning("%s on %s", exc, request.full_path)
        return jsonify({"error": "search limit reached", "max_expansions": MAX_EXPANSIONS}), 400

    @app.errorhandler(Exception)
    def internal_error(exc: Exception):
        if isinstance(exc, HTTPException):
            return exc
        log.exception("Request failed")
        return jsonify({"error": str(exc)}), 500

    @app.route("/blend")
    def blend_view():
        a = canon_color(request.args.get("a"))
        b = canon_color(request.args.get("b"))
        ratio = parse_ratio(request.args.get("ratio"))
        mode = parse_mode(request.args.get("mode"))
        result = blend(a, b, ratio, mode)
        return jsonify({"result": result.hex, "code": result.code})

    @app.route("/path")
    def path_view():
        start = canon_color(request.args.get("start"))
        target = canon_color(request.args.get("target"))
        palette = parse_palette(request.args.get("palette"))
        steps = parse_int(request.args.get("steps"), 5, 0, MAX_STEPS_LIMIT)
        tolerance = parse_int(request.args.get("tolerance"), 0, 0, 255)
        mode = parse_mode(request.args.get("mode"))
        optimal = parse_flag(request.args.get("optimal"), True)

        found = find_path(
            start, target, palette, steps,
            tolerance=tolerance, use_optimal_ratio=optimal, mode=mode,
            max_expansions=MAX_EXPANSIONS,
        )
        if found is None:
            return jsonify({"path": None, "ratios": None})
        return jsonify(found.to_dict())

    @app.route("/min-steps")
    def min_steps_view():
        start = canon_color(request.args.get("start"))
        target = canon_color(request.args.get("target"))
        palette = parse_palette(request.args.get("palette"))
        tolerance = parse_int(request.args.get("tolerance"), 0, 0, 255)
        mode = parse_mode(request.args.get("mode"))
        n = calculate_min_steps(
            start, target, palette,
            tolerance=tolerance, mode=mode, max_expansions=MAX_EXPANSIONS,
        )
        return jsonify({"min_steps": n})

    @app.route("/chart")
    def chart_view():
        return jsonify(
            [{"from": a, "to": b, "result": r} for a, b, r in all_combinations()]
        )

    @app.route("/level/check", methods=["POST"])
    def level_check_view():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            raise InvalidParam("expected a JSON level object")
        for key in ("startColor", "targetColor"):
            if key in data:
                data[key] = canon_color(data[key])
        data["allowedColors"] = [canon_color(c) for c in data.get("allowedColors") or []]
        try:
            level = Level.from_dict(data)
        except (TypeError, ValueError) as exc:
            raise InvalidParam(str(exc)) from exc
        return jsonify(check_level(level, max_expansions=MAX_EXPANSIONS).to_dict())

    return app


__all__ = ["MAX_EXPANSIONS", "MAX_STEPS_LIMIT", "InvalidParam", "canon_color", "create_app"]
