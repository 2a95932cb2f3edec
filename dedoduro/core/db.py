# dedoduro/core/db.py
import json
import logging
import os
from typing import Any, Dict, List, Union

from dedoduro.config import DATA_DIR
from dedoduro.core.models import Expense, FixedEntry, Income

logger = logging.getLogger(__name__)

# Coleções e seus arquivos
EXPENSES = "expenses"
INCOMES = "incomes"
FIXED_EXPENSES = "fixed_expenses"
FIXED_INCOMES = "fixed_incomes"

COLLECTION_FILES = {
    EXPENSES: "expenses.json",
    INCOMES: "income.json",
    FIXED_EXPENSES: "fixed_expenses.json",
    FIXED_INCOMES: "fixed_income.json",
}


class JsonStore:
    """Guarda cada coleção como um array JSON em um arquivo próprio.

    Sempre lê a coleção inteira e sobrescreve a coleção inteira. Não há
    transação nem lock: um único processo acessando em sequência.
    """

    def __init__(self, data_dir: str):
        self.data_dir = data_dir

    def path_for(self, collection: str) -> str:
        return os.path.join(self.data_dir, COLLECTION_FILES[collection])

    def ensure_collections(self) -> None:
        """Cria a pasta de dados e os arquivos que ainda não existem com `[]`."""
        os.makedirs(self.data_dir, exist_ok=True)
        for collection in COLLECTION_FILES:
            path = self.path_for(collection)
            if not os.path.exists(path):
                self.write(collection, [])

    def read(self, collection: str) -> List[Dict[str, Any]]:
        path = self.path_for(collection)
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except FileNotFoundError:
            logger.warning("Arquivo %s não existe, usando coleção vazia", path)
            return []
        except (OSError, ValueError):
            logger.exception("Erro ao ler arquivo %s", path)
            return []
        if not isinstance(data, list):
            logger.error("Arquivo %s não contém uma lista, usando coleção vazia", path)
            return []
        return data

    def write(self, collection: str, records: List[Dict[str, Any]]) -> bool:
        path = self.path_for(collection)
        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(records, f, indent=2, ensure_ascii=False)
            return True
        except (OSError, TypeError, ValueError):
            logger.exception("Erro ao escrever no arquivo %s", path)
            return False


def get_store(data_dir: Union[str, None] = None) -> JsonStore:
    """Retorna o store apontando para a pasta de dados configurada."""
    return JsonStore(data_dir or DATA_DIR)


# --- Funções para Despesas ---
def add_expense(store: JsonStore, date: str, category: str, description: str, amount: float, payment_method: str) -> bool:
    expenses = store.read(EXPENSES)
    expenses.append(Expense(date, category, description, amount, payment_method).to_dict())
    return store.write(EXPENSES, expenses)


def get_expenses(store: JsonStore) -> list:
    return store.read(EXPENSES)


def get_expenses_by_date(store: JsonStore, date: str) -> list:
    """Despesas de um dia (YYYY-MM-DD), na ordem em que foram gravadas."""
    return [expense for expense in store.read(EXPENSES) if expense.get("date") == date]


def _same_expense(a: Dict[str, Any], b: Dict[str, Any]) -> bool:
    return (
        a.get("date") == b.get("date")
        and a.get("category") == b.get("category")
        and a.get("description") == b.get("description")
        and a.get("amount") == b.get("amount")
        and a.get("paymentMethod") == b.get("paymentMethod")
    )


def delete_expense(store: JsonStore, expense_to_delete: Dict[str, Any]) -> bool:
    """Remove todas as despesas iguais, campo a campo, à despesa informada.

    Duas despesas idênticas no mesmo dia são removidas juntas.
    """
    expenses = store.read(EXPENSES)
    updated = [expense for expense in expenses if not _same_expense(expense, expense_to_delete)]
    return store.write(EXPENSES, updated)


# --- Funções para Receitas ---
def add_income(store: JsonStore, date: str, description: str, amount: float) -> bool:
    incomes = store.read(INCOMES)
    incomes.append(Income(date, description, amount).to_dict())
    return store.write(INCOMES, incomes)


def get_incomes(store: JsonStore) -> list:
    return store.read(INCOMES)


# --- Funções para Despesas e Receitas Fixas ---
def add_fixed_entry(store: JsonStore, collection: str, description: str, amount: float, day: int) -> bool:
    entries = store.read(collection)
    entries.append(FixedEntry(description, amount, day).to_dict())
    return store.write(collection, entries)


def get_fixed_entries(store: JsonStore, collection: str) -> list:
    return store.read(collection)


def delete_fixed_entry(store: JsonStore, collection: str, index: int) -> Union[Dict[str, Any], None]:
    """Remove o item na posição `index` (0-based). Retorna o item removido."""
    entries = store.read(collection)
    if index < 0 or index >= len(entries):
        return None
    removed = entries.pop(index)
    store.write(collection, entries)
    return removed
