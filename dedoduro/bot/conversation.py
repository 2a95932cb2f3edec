# dedoduro/bot/conversation.py
import datetime
import logging
from typing import Callable, List, Union

from dedoduro import config
from dedoduro.bot import messages
from dedoduro.bot.handlers import STEP_HANDLERS
from dedoduro.bot.sessions import SessionRepository, Step
from dedoduro.bot.turn import Turn
from dedoduro.core.db import JsonStore

logger = logging.getLogger(__name__)

# Funcionam em qualquer ponto da conversa
MENU_WORDS = {"menu", "voltar"}


class Conversation:
    """Máquina de estados do bot: uma mensagem entra, as respostas saem.

    Não sabe nada do Telegram; quem chama é responsável por enviar as
    respostas e por tratar exceções.
    """

    def __init__(
        self,
        store: JsonStore,
        sessions: Union[SessionRepository, None] = None,
        today: Callable[[], datetime.date] = config.today,
    ):
        self.store = store
        self.sessions = sessions if sessions is not None else SessionRepository()
        self._today = today

    def handle_message(self, sender: str, text: str) -> List[str]:
        session = self.sessions.get_or_create(sender)
        text = (text or "").strip()
        turn = Turn(session, self.store, self._today())

        logger.info("Mensagem recebida de %s (%s): %s", sender, session.step.value, text)

        if session.step is Step.INITIAL or text.lower() in MENU_WORDS:
            turn.show_main_menu()
            return turn.replies

        handler = STEP_HANDLERS.get(session.step)
        if handler is None:
            turn.reply(messages.NOT_UNDERSTOOD)
            turn.show_main_menu()
            return turn.replies

        handler(turn, text)
        return turn.replies
