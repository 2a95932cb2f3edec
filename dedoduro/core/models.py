# dedoduro/core/models.py
from typing import Any, Dict

# Os registros circulam pelo código como dicionários (é o que vai para o JSON).
# Estas classes documentam a estrutura e garantem a ordem dos campos no arquivo.

EXPENSE_CATEGORIES = ["alimentação", "transporte", "moradia", "lazer", "assinaturas", "outros"]

PAYMENT_METHODS = ["dinheiro", "pix", "cartão de crédito", "cartão de débito"]

# Sinônimos aceitos na escolha da forma de pagamento
PAYMENT_METHOD_ALIASES = {
    "credito": "cartão de crédito",
    "debito": "cartão de débito",
}

EXPENSE_FIELDS = ["date", "category", "description", "amount", "paymentMethod"]
INCOME_FIELDS = ["date", "description", "amount"]
FIXED_ENTRY_FIELDS = ["description", "amount", "day"]


class Expense:
    def __init__(self, date: str, category: str, description: str, amount: float, payment_method: str):
        self.date = date
        self.category = category
        self.description = description
        self.amount = amount
        self.payment_method = payment_method

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "category": self.category,
            "description": self.description,
            "amount": self.amount,
            "paymentMethod": self.payment_method,
        }


class Income:
    def __init__(self, date: str, description: str, amount: float):
        self.date = date
        self.description = description
        self.amount = amount

    def to_dict(self) -> Dict[str, Any]:
        return {
            "date": self.date,
            "description": self.description,
            "amount": self.amount,
        }


class FixedEntry:
    """Despesa ou receita fixa: se repete todo mês no dia `day`, sem data própria."""

    def __init__(self, description: str, amount: float, day: int):
        self.description = description
        self.amount = amount
        self.day = day

    def to_dict(self) -> Dict[str, Any]:
        return {
            "description": self.description,
            "amount": self.amount,
            "day": self.day,
        }
