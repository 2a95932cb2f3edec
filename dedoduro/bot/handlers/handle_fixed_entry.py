import logging

from dedoduro.bot import messages
from dedoduro.bot.sessions import Step
from dedoduro.bot.turn import Turn
from dedoduro.core import db
from dedoduro.utils.text_utils import parse_amount_text, parse_day

logger = logging.getLogger(__name__)

# Despesas e receitas fixas seguem o mesmo fluxo: texto -> dia do mês
FIXED_EXPENSE = {
    "collection": db.FIXED_EXPENSES,
    "context_key": "fixed_expense_description",
    "day_step": Step.WAITING_FOR_FIXED_EXPENSE_DAY,
    "parse_failed": messages.FIXED_EXPENSE_PARSE_FAILED,
    "added": messages.FIXED_EXPENSE_ADDED,
}

FIXED_INCOME = {
    "collection": db.FIXED_INCOMES,
    "context_key": "fixed_income_description",
    "day_step": Step.WAITING_FOR_FIXED_INCOME_DAY,
    "parse_failed": messages.FIXED_INCOME_PARSE_FAILED,
    "added": messages.FIXED_INCOME_ADDED,
}


def _handle_details(turn: Turn, text: str, kind: dict) -> None:
    turn.context[kind["context_key"]] = text
    turn.reply(messages.ASK_DAY)
    turn.go_to(kind["day_step"])


def _handle_day(turn: Turn, text: str, kind: dict) -> None:
    day = parse_day(text)
    if day is None:
        turn.reply(messages.INVALID_DAY)
        return

    parsed = parse_amount_text(turn.context.get(kind["context_key"], ""))
    if parsed is None:
        turn.reply(kind["parse_failed"])
        turn.finish()
        return

    if not db.add_fixed_entry(turn.store, kind["collection"], parsed.description, parsed.amount, day):
        logger.error("Item fixo de %s não foi gravado em %s: %s", turn.session.sender, kind["collection"], parsed)

    turn.reply(kind["added"].format(description=parsed.description, day=day))
    turn.finish()


def handle_fixed_expense_details(turn: Turn, text: str) -> None:
    _handle_details(turn, text, FIXED_EXPENSE)


def handle_fixed_expense_day(turn: Turn, text: str) -> None:
    _handle_day(turn, text, FIXED_EXPENSE)


def handle_fixed_income_details(turn: Turn, text: str) -> None:
    _handle_details(turn, text, FIXED_INCOME)


def handle_fixed_income_day(turn: Turn, text: str) -> None:
    _handle_day(turn, text, FIXED_INCOME)
