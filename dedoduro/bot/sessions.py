# dedoduro/bot/sessions.py
from enum import Enum
from typing import Any, Dict, Union


# --- Estados da Conversa ---
class Step(str, Enum):
    INITIAL = "initial"
    WAITING_FOR_COMMAND = "waitingForCommand"
    WAITING_FOR_EXPENSE_CATEGORY = "waitingForExpenseCategory"
    WAITING_FOR_EXPENSE_DETAILS = "waitingForExpenseDetails"
    WAITING_FOR_PAYMENT_METHOD = "waitingForPaymentMethod"
    WAITING_FOR_INCOME_DETAILS = "waitingForIncomeDetails"
    WAITING_FOR_FIXED_EXPENSE_DETAILS = "waitingForFixedExpenseDetails"
    WAITING_FOR_FIXED_EXPENSE_DAY = "waitingForFixedExpenseDay"
    WAITING_FOR_FIXED_INCOME_DETAILS = "waitingForFixedIncomeDetails"
    WAITING_FOR_FIXED_INCOME_DAY = "waitingForFixedIncomeDay"
    WAITING_FOR_DELETE_OPTION = "waitingForDeleteOption"
    WAITING_FOR_EXPENSE_DATE = "waitingForExpenseDate"
    WAITING_FOR_EXPENSE_INDEX = "waitingForExpenseIndex"
    WAITING_FOR_FIXED_EXPENSE_INDEX = "waitingForFixedExpenseIndex"
    WAITING_FOR_FIXED_INCOME_INDEX = "waitingForFixedIncomeIndex"


class Session:
    def __init__(self, sender: str):
        self.sender = sender
        self.step = Step.INITIAL
        self.context: Dict[str, Any] = {}

    def reset(self) -> None:
        self.step = Step.INITIAL
        self.context = {}


class SessionRepository:
    """Sessões em memória, uma por remetente. Somem quando o processo reinicia."""

    def __init__(self):
        self._sessions: Dict[str, Session] = {}

    def get(self, sender: str) -> Union[Session, None]:
        return self._sessions.get(sender)

    def get_or_create(self, sender: str) -> Session:
        session = self._sessions.get(sender)
        if session is None:
            session = Session(sender)
            self._sessions[sender] = session
        return session

    def reset(self, sender: str) -> Session:
        session = self.get_or_create(sender)
        session.reset()
        return session

    def __len__(self) -> int:
        return len(self._sessions)
