import logging

from dedoduro.bot import messages
from dedoduro.bot.turn import Turn
from dedoduro.core import db
from dedoduro.utils.text_utils import format_plain_amount, parse_income_text

logger = logging.getLogger(__name__)


def handle_income_details(turn: Turn, text: str) -> None:
    """Registra uma receita no formato "Descrição: valor"."""
    parsed = parse_income_text(text)
    if parsed is None:
        turn.reply(messages.INCOME_PARSE_FAILED)
        turn.finish()
        return

    if not db.add_income(turn.store, turn.today_str, parsed.description, parsed.amount):
        logger.error("Receita de %s não foi gravada: %s", turn.session.sender, parsed)

    turn.reply(messages.INCOME_ADDED.format(
        description=parsed.description,
        amount=format_plain_amount(parsed.amount),
    ))
    turn.finish()
