# dedoduro/bot/bot_setup.py
import logging

from telegram.ext import Application, CommandHandler, MessageHandler, filters

from dedoduro.bot.commands import help_command, start_command
from dedoduro.bot.conversation import Conversation
from dedoduro.bot.messaging import handle_text_message

logger = logging.getLogger(__name__)


def setup_bot(config: dict) -> Application:
    """
    Configura a aplicação do bot do Telegram (comandos e mensagens de texto).
    Retorna o Application pronto para rodar por polling ou receber updates via webhook.
    """
    application = Application.builder().token(config["TELEGRAM_BOT_TOKEN"]).build()

    # A conversa (sessões + store) fica no bot_data para os handlers
    application.bot_data["conversation"] = Conversation(config["STORE"])

    application.add_handler(CommandHandler("start", start_command))
    application.add_handler(CommandHandler("help", help_command))
    # Todo o resto passa pela máquina de estados da conversa
    application.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, handle_text_message))

    logger.info("Bot Telegram configurado.")
    return application
