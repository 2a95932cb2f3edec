from dedoduro.bot import messages
from dedoduro.bot.sessions import Step
from dedoduro.bot.turn import Turn
from dedoduro.core import db
from dedoduro.utils.text_utils import format_amount, parse_br_date, parse_index


def _list_fixed_entries(turn: Turn, collection: str, empty_message: str, header: str, next_step: Step) -> None:
    entries = db.get_fixed_entries(turn.store, collection)
    if not entries:
        turn.reply(empty_message)
        turn.finish()
        return

    message = header
    for position, item in enumerate(entries, start=1):
        message += f"{position}. {item['description']} - R$ {format_amount(item['amount'])} (Dia {item['day']})\n"
    turn.reply(message)
    turn.go_to(next_step)


def handle_delete_option(turn: Turn, text: str) -> None:
    option = text.lower()

    if option == "despesa":
        turn.reply(messages.ASK_EXPENSE_DATE)
        turn.go_to(Step.WAITING_FOR_EXPENSE_DATE)
    elif option == "despesa fixa":
        _list_fixed_entries(turn, db.FIXED_EXPENSES, messages.NO_FIXED_EXPENSES,
                            messages.CHOOSE_FIXED_EXPENSE, Step.WAITING_FOR_FIXED_EXPENSE_INDEX)
    elif option == "receita fixa":
        _list_fixed_entries(turn, db.FIXED_INCOMES, messages.NO_FIXED_INCOMES,
                            messages.CHOOSE_FIXED_INCOME, Step.WAITING_FOR_FIXED_INCOME_INDEX)
    else:
        turn.reply(messages.INVALID_DELETE_OPTION)


def handle_expense_date(turn: Turn, text: str) -> None:
    date_str = parse_br_date(text)
    if date_str is None:
        turn.reply(messages.INVALID_DATE)
        return

    day_expenses = db.get_expenses_by_date(turn.store, date_str)
    if not day_expenses:
        turn.reply(messages.NO_EXPENSES_ON_DATE)
        turn.finish()
        return

    message = messages.CHOOSE_EXPENSE
    for position, expense in enumerate(day_expenses, start=1):
        message += (
            f"{position}. {expense['category']} - {expense['description']} - "
            f"R$ {format_amount(expense['amount'])} ({expense['paymentMethod']})\n"
        )

    turn.context["date_str"] = date_str
    turn.reply(message)
    turn.go_to(Step.WAITING_FOR_EXPENSE_INDEX)


def handle_expense_index(turn: Turn, text: str) -> None:
    # A lista do dia é lida de novo do arquivo, não reaproveitada da mensagem anterior
    day_expenses = db.get_expenses_by_date(turn.store, turn.context.get("date_str"))
    index = parse_index(text, len(day_expenses))
    if index is None:
        turn.reply(messages.INVALID_INDEX)
        return

    expense_to_delete = day_expenses[index]
    db.delete_expense(turn.store, expense_to_delete)
    turn.reply(messages.EXPENSE_DELETED.format(
        description=expense_to_delete["description"],
        amount=format_amount(expense_to_delete["amount"]),
    ))
    turn.finish()


def _delete_fixed_entry(turn: Turn, text: str, collection: str, deleted_message: str) -> None:
    entries = db.get_fixed_entries(turn.store, collection)
    index = parse_index(text, len(entries))
    if index is None:
        turn.reply(messages.INVALID_INDEX)
        return

    removed = db.delete_fixed_entry(turn.store, collection, index)
    turn.reply(deleted_message.format(
        description=removed["description"],
        amount=format_amount(removed["amount"]),
    ))
    turn.finish()


def handle_fixed_expense_index(turn: Turn, text: str) -> None:
    _delete_fixed_entry(turn, text, db.FIXED_EXPENSES, messages.FIXED_EXPENSE_DELETED)


def handle_fixed_income_index(turn: Turn, text: str) -> None:
    _delete_fixed_entry(turn, text, db.FIXED_INCOMES, messages.FIXED_INCOME_DELETED)
