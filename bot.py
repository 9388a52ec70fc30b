"""
Telegram Bot — chat front end for the weather widget.

Sends every city the user types (or passes to /weather) through the
orchestrator and replies with the rendered result. Also serves the
web widget.

Usage:
  python bot.py
"""

import asyncio
import logging
import threading

from telegram import Update
from telegram.ext import (
    ApplicationBuilder,
    CommandHandler,
    MessageHandler,
    filters,
    ContextTypes,
)

from config import TELEGRAM_BOT_TOKEN, OWNER_CHAT_ID, DEFAULT_CITY, LOG_LEVEL
from orchestrator import Orchestrator
from view import View, render_text

logging.basicConfig(
    format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
    level=getattr(logging, LOG_LEVEL.upper(), logging.INFO),
)
log = logging.getLogger("bot")


def log_view(view: View):
    """Render target: trace every panel change on the console."""
    log.info(f"Widget panel: {view.panel}")


orchestrator = Orchestrator(render_targets=[log_view])


# ── Auth ────────────────────────────────────────────────────────

def owner_only(func):
    """Restrict to OWNER_CHAT_ID. Set to 0 in .env to allow everyone."""
    async def wrapper(update: Update, context: ContextTypes.DEFAULT_TYPE):
        if OWNER_CHAT_ID and update.effective_chat.id != OWNER_CHAT_ID:
            await update.message.reply_text("Not authorized.")
            return
        return await func(update, context)
    return wrapper


# ── Command handlers ────────────────────────────────────────────

@owner_only
async def cmd_start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(
        "Weather bot online. Commands:\n\n"
        "/weather <city>  — current weather for a city\n"
        "/status  — show the last result\n"
        "/help  — show this message\n\n"
        "Or just send a city name."
    )


@owner_only
async def cmd_help(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await cmd_start(update, context)


@owner_only
async def cmd_status(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(orchestrator.get_status_text())


async def _search(update: Update, text: str):
    if orchestrator.busy:
        await update.message.reply_text("A search is already running, try again in a moment.")
        return
    state = await orchestrator.submit(text)
    await update.message.reply_text(render_text(state))


@owner_only
async def cmd_weather(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await _search(update, " ".join(context.args or []))


@owner_only
async def handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Treat plain text messages as a city search."""
    text = update.message.text
    if text is None:
        return
    await _search(update, text)


# ── Main ────────────────────────────────────────────────────────

def run_dashboard():
    """Run the Flask widget (blocking)."""
    from dashboard import create_app
    from config import DASHBOARD_HOST, DASHBOARD_PORT
    app = create_app(orchestrator)
    # Suppress Flask request logs in the main console
    logging.getLogger("werkzeug").setLevel(logging.WARNING)
    log.info(f"Widget: http://{DASHBOARD_HOST}:{DASHBOARD_PORT}")
    app.run(host=DASHBOARD_HOST, port=DASHBOARD_PORT, use_reloader=False)


def start_dashboard_in_thread():
    try:
        run_dashboard()
    except Exception as e:
        log.error(f"Widget failed to start: {e}")


def main():
    if DEFAULT_CITY:
        log.info(f"Loading default city: {DEFAULT_CITY}")
        loop = asyncio.new_event_loop()
        try:
            loop.run_until_complete(orchestrator.submit(DEFAULT_CITY))
        finally:
            loop.close()

    if not TELEGRAM_BOT_TOKEN:
        log.info("TELEGRAM_BOT_TOKEN not set, serving the web widget only")
        run_dashboard()
        return

    # Start widget in background thread
    dash_thread = threading.Thread(target=start_dashboard_in_thread, daemon=True)
    dash_thread.start()

    app = ApplicationBuilder().token(TELEGRAM_BOT_TOKEN).build()

    app.add_handler(CommandHandler("start", cmd_start))
    app.add_handler(CommandHandler("help", cmd_help))
    app.add_handler(CommandHandler("status", cmd_status))
    app.add_handler(CommandHandler("weather", cmd_weather))
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_message))

    log.info("Bot starting (Telegram polling)...")
    app.run_polling()


if __name__ == "__main__":
    main()
