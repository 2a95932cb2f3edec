# dedoduro/main.py
import argparse
import asyncio
import logging

from flask import Flask, jsonify, request
from telegram import Update
from telegram.ext import Application

from dedoduro import config
from dedoduro.bot.bot_setup import setup_bot
from dedoduro.core.db import get_store

logger = logging.getLogger(__name__)

WEBHOOK_PATH = "/webhook"


def configure_logging(level: str = config.LOG_LEVEL) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # O httpx do python-telegram-bot loga cada requisição em INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def build_application() -> Application:
    """Prepara os arquivos de dados e monta o Application do Telegram."""
    if not config.TELEGRAM_BOT_TOKEN:
        raise SystemExit("TELEGRAM_BOT_TOKEN não configurado")

    store = get_store()
    store.ensure_collections()
    logger.info("Arquivos de dados prontos em %s", store.data_dir)

    return setup_bot({
        "TELEGRAM_BOT_TOKEN": config.TELEGRAM_BOT_TOKEN,
        "STORE": store,
    })


def create_app(ptb_application: Application) -> Flask:
    """Aplicação Flask que recebe os updates do Telegram por webhook."""
    flask_app = Flask(__name__)

    @flask_app.route("/health", methods=["GET"])
    def health():
        return jsonify({"status": "ok"}), 200

    @flask_app.route(WEBHOOK_PATH, methods=["POST"])
    async def telegram_webhook():
        if not request.is_json:
            logger.error("Webhook recebeu requisição que não é JSON")
            return jsonify({"status": "error", "message": "Request must be JSON"}), 400

        update_json = request.get_json()
        try:
            update = Update.de_json(update_json, ptb_application.bot)
            await ptb_application.process_update(update)
            return jsonify({"status": "ok"}), 200
        except Exception:
            logger.exception("Falha ao processar update do Telegram")
            return jsonify({"status": "error", "message": "Failed to process update"}), 500

    return flask_app


def create_wsgi_app() -> Flask:
    """Ponto de entrada para o Gunicorn: `gunicorn 'dedoduro.main:create_wsgi_app()'`."""
    configure_logging()
    ptb_application = build_application()
    # O Application precisa ser inicializado uma vez antes de processar updates
    asyncio.run(ptb_application.initialize())
    return create_app(ptb_application)


def main() -> None:
    parser = argparse.ArgumentParser(description="Bot DEDO DURO de despesas e receitas")
    parser.add_argument("--polling", action="store_true", help="força long polling mesmo com BOT_MODE=webhook")
    args = parser.parse_args()

    configure_logging()
    if args.polling or config.BOT_MODE == "polling":
        logger.info("Iniciando bot em modo polling")
        build_application().run_polling(allowed_updates=["message"])
        return

    flask_app = create_wsgi_app()
    logger.info("Servidor de webhook ouvindo na porta %s", config.PORT)
    flask_app.run(host="0.0.0.0", port=config.PORT)


if __name__ == "__main__":
    main()
