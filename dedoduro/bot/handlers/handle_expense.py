import logging

from dedoduro.bot import messages
from dedoduro.bot.sessions import Step
from dedoduro.bot.turn import Turn
from dedoduro.core import db
from dedoduro.utils.text_utils import format_plain_amount, parse_amount_text, parse_category, parse_payment_method

logger = logging.getLogger(__name__)


def handle_expense_category(turn: Turn, text: str) -> None:
    category = parse_category(text)
    if category is None:
        turn.reply(messages.INVALID_CATEGORY)
        return

    turn.context["expense_category"] = category
    turn.reply(messages.ASK_EXPENSE_DETAILS)
    turn.go_to(Step.WAITING_FOR_EXPENSE_DETAILS)


def handle_expense_details(turn: Turn, text: str) -> None:
    # Só guarda o texto; a descrição e o valor são extraídos depois da forma de pagamento
    turn.context["expense_details"] = text
    turn.reply(messages.ASK_PAYMENT_METHOD)
    turn.go_to(Step.WAITING_FOR_PAYMENT_METHOD)


def handle_payment_method(turn: Turn, text: str) -> None:
    payment_method = parse_payment_method(text)
    if payment_method is None:
        turn.reply(messages.INVALID_PAYMENT_METHOD)
        return

    parsed = parse_amount_text(turn.context.get("expense_details", ""))
    if parsed is None:
        # Continua esperando a forma de pagamento; para corrigir o texto o usuário volta ao menu
        turn.reply(messages.EXPENSE_PARSE_FAILED)
        return

    category = turn.context["expense_category"]
    if not db.add_expense(turn.store, turn.today_str, category, parsed.description, parsed.amount, payment_method):
        logger.error("Despesa de %s não foi gravada: %s", turn.session.sender, parsed)

    turn.reply(messages.EXPENSE_ADDED.format(
        category=category.upper(),
        description=parsed.description,
        amount=format_plain_amount(parsed.amount),
    ))
    turn.finish()
