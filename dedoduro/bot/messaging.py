# dedoduro/bot/messaging.py
import logging
from typing import Iterable

from telegram import Bot, Update
from telegram.error import TelegramError
from telegram.ext import ContextTypes

from dedoduro.bot import messages
from dedoduro.bot.conversation import Conversation

logger = logging.getLogger(__name__)


async def send_message(bot: Bot, chat_id: str, text: str) -> bool:
    """Envia uma mensagem; falhas são registradas e engolidas, sem nova tentativa."""
    try:
        await bot.send_message(chat_id=chat_id, text=text)
        logger.info("Mensagem enviada para %s", chat_id)
        return True
    except TelegramError:
        logger.exception("Erro ao enviar mensagem para %s", chat_id)
        return False


async def send_replies(bot: Bot, chat_id: str, replies: Iterable[str]) -> None:
    for reply in replies:
        await send_message(bot, chat_id, reply)


async def process_text(bot: Bot, conversation: Conversation, chat_id: str, text: str) -> None:
    """Passa a mensagem pela conversa e envia as respostas.

    Um erro inesperado vira um pedido de desculpas; a sessão fica como estava.
    """
    try:
        replies = conversation.handle_message(chat_id, text)
    except Exception:
        logger.exception("Erro ao processar mensagem de %s", chat_id)
        await send_message(bot, chat_id, messages.GENERIC_ERROR)
        return
    await send_replies(bot, chat_id, replies)


async def handle_text_message(update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
    """Handler do Telegram para toda mensagem de texto que não é comando."""
    if update.message is None or update.message.text is None:
        return
    conversation = context.bot_data["conversation"]
    chat_id = str(update.effective_chat.id)
    await process_text(context.bot, conversation, chat_id, update.message.text)
