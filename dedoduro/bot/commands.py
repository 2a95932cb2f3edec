from telegram import Update
from telegram.ext import ContextTypes

from dedoduro.bot import messages
from dedoduro.bot.messaging import process_text


async def start_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """/start funciona como digitar "menu"."""
    conversation = context.bot_data["conversation"]
    await process_text(context.bot, conversation, str(update.effective_chat.id), "menu")


async def help_command(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Envia uma mensagem quando o comando /help é emitido."""
    await update.message.reply_text(messages.HELP)
