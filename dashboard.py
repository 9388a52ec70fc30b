"""
Weather widget — Flask web UI for city searches.

Provides:
  - The widget page: city input, search button, progress indicator,
    error region and result region (exactly one of them shown)
  - A form action that runs a search and redirects back to the page
  - REST API for programmatic access

Runs in a background thread alongside the Telegram bot, or on its own
when no bot token is configured.
"""

import asyncio

from flask import Flask, render_template, request, jsonify, redirect, url_for

from config import DASHBOARD_SECRET


_orchestrator = None  # set via create_app()


def _run(coro):
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


def create_app(orchestrator):
    global _orchestrator
    _orchestrator = orchestrator

    app = Flask(__name__)
    app.secret_key = DASHBOARD_SECRET

    # ── Pages ───────────────────────────────────────────────

    @app.route("/")
    def index():
        return render_template(
            "widget.html",
            view=_orchestrator.view,
            city=request.args.get("city", ""),
        )

    # ── API endpoints ───────────────────────────────────────

    @app.route("/api/state", methods=["GET"])
    def api_state():
        return jsonify(_orchestrator.view.to_dict())

    @app.route("/api/search", methods=["POST"])
    def api_search():
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            return jsonify({"error": "JSON object with a city is required"}), 400
        city = data.get("city") or ""
        if not isinstance(city, str):
            return jsonify({"error": "city must be a string"}), 400
        _run(_orchestrator.submit(city))
        return jsonify(_orchestrator.view.to_dict())

    # ── Form actions (from the widget page) ─────────────────

    @app.route("/search", methods=["POST"])
    def action_search():
        # The button and Enter in the input both submit this form
        city = request.form.get("city", "")
        _run(_orchestrator.submit(city))
        return redirect(url_for("index", city=city.strip()))

    return app
