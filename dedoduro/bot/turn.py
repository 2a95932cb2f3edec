# dedoduro/bot/turn.py
import datetime
from typing import List

from dedoduro.bot import messages
from dedoduro.bot.sessions import Session, Step
from dedoduro.core.db import JsonStore


class Turn:
    """Tudo que um handler precisa para responder a uma mensagem.

    Os handlers não enviam nada: acumulam respostas em `replies`, que o
    transporte envia na ordem.
    """

    def __init__(self, session: Session, store: JsonStore, today: datetime.date):
        self.session = session
        self.store = store
        self.today = today
        self.replies: List[str] = []

    @property
    def context(self) -> dict:
        return self.session.context

    @property
    def today_str(self) -> str:
        return self.today.strftime("%Y-%m-%d")

    def reply(self, text: str) -> None:
        self.replies.append(text)

    def go_to(self, step: Step) -> None:
        self.session.step = step

    def show_main_menu(self) -> None:
        self.reply(messages.MAIN_MENU)
        self.session.step = Step.WAITING_FOR_COMMAND

    def finish(self) -> None:
        """Fim de um fluxo: limpa a sessão e volta ao menu."""
        self.session.reset()
        self.show_main_menu()
