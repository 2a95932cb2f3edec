from dedoduro.bot import messages
from dedoduro.bot.sessions import Step
from dedoduro.bot.turn import Turn
from dedoduro.core import reports


def _send_summary(turn: Turn, summary: str) -> None:
    # Depois de um resumo a sessão volta para "initial" sem mostrar o menu
    turn.reply(summary)
    turn.session.reset()


def _daily_summary(turn: Turn) -> None:
    _send_summary(turn, reports.daily_summary(turn.store, turn.today))


def _monthly_summary(turn: Turn) -> None:
    _send_summary(turn, reports.monthly_summary(turn.store, turn.today))


def _annual_summary(turn: Turn) -> None:
    _send_summary(turn, reports.annual_summary(turn.store, turn.today))


def _prompt(text: str, next_step: Step):
    def start_flow(turn: Turn) -> None:
        turn.reply(text)
        turn.go_to(next_step)

    return start_flow


COMMANDS = {
    "registrar despesas": _prompt(messages.ASK_EXPENSE_CATEGORY, Step.WAITING_FOR_EXPENSE_CATEGORY),
    "registrar receita": _prompt(messages.ASK_INCOME_DETAILS, Step.WAITING_FOR_INCOME_DETAILS),
    "resumo diário": _daily_summary,
    "resumo mensal": _monthly_summary,
    "resumo anual": _annual_summary,
    "incluir despesas fixas": _prompt(messages.ASK_FIXED_EXPENSE_DETAILS, Step.WAITING_FOR_FIXED_EXPENSE_DETAILS),
    "incluir receitas fixas": _prompt(messages.ASK_FIXED_INCOME_DETAILS, Step.WAITING_FOR_FIXED_INCOME_DETAILS),
    "deletar": _prompt(messages.ASK_DELETE_OPTION, Step.WAITING_FOR_DELETE_OPTION),
}


def handle_command(turn: Turn, text: str) -> None:
    """Escolha de uma opção do menu principal."""
    command = COMMANDS.get(text.lower())
    if command is None:
        turn.reply(messages.UNKNOWN_COMMAND)
        turn.show_main_menu()
        return
    command(turn)
