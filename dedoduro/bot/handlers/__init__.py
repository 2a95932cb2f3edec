from dedoduro.bot.sessions import Step

from .handle_command import handle_command
from .handle_delete import (
    handle_delete_option,
    handle_expense_date,
    handle_expense_index,
    handle_fixed_expense_index,
    handle_fixed_income_index,
)
from .handle_expense import handle_expense_category, handle_expense_details, handle_payment_method
from .handle_fixed_entry import (
    handle_fixed_expense_day,
    handle_fixed_expense_details,
    handle_fixed_income_day,
    handle_fixed_income_details,
)
from .handle_income import handle_income_details

# Estado atual -> handler que interpreta a próxima mensagem.
# Step.INITIAL não tem handler: a conversa sempre começa pelo menu.
STEP_HANDLERS = {
    Step.WAITING_FOR_COMMAND: handle_command,
    Step.WAITING_FOR_EXPENSE_CATEGORY: handle_expense_category,
    Step.WAITING_FOR_EXPENSE_DETAILS: handle_expense_details,
    Step.WAITING_FOR_PAYMENT_METHOD: handle_payment_method,
    Step.WAITING_FOR_INCOME_DETAILS: handle_income_details,
    Step.WAITING_FOR_FIXED_EXPENSE_DETAILS: handle_fixed_expense_details,
    Step.WAITING_FOR_FIXED_EXPENSE_DAY: handle_fixed_expense_day,
    Step.WAITING_FOR_FIXED_INCOME_DETAILS: handle_fixed_income_details,
    Step.WAITING_FOR_FIXED_INCOME_DAY: handle_fixed_income_day,
    Step.WAITING_FOR_DELETE_OPTION: handle_delete_option,
    Step.WAITING_FOR_EXPENSE_DATE: handle_expense_date,
    Step.WAITING_FOR_EXPENSE_INDEX: handle_expense_index,
    Step.WAITING_FOR_FIXED_EXPENSE_INDEX: handle_fixed_expense_index,
    Step.WAITING_FOR_FIXED_INCOME_INDEX: handle_fixed_income_index,
}
