# tests/test_conversation.py
import datetime
import tempfile
import unittest
from unittest.mock import patch

from dedoduro.bot import messages
from dedoduro.bot.conversation import Conversation
from dedoduro.bot.sessions import SessionRepository, Step
from dedoduro.core import db, reports

TODAY = datetime.date(2025, 7, 10)
SENDER = "5511999999999"


def make_expense(description="Mercado", amount=120.0, date="2025-07-10", category="Alimentação", method="pix"):
    return {
        "date": date,
        "category": category,
        "description": description,
        "amount": amount,
        "paymentMethod": method,
    }


class ConversationTestCase(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmp.cleanup)
        self.store = db.get_store(self.tmp.name)
        self.store.ensure_collections()
        self.sessions = SessionRepository()
        self.conversation = Conversation(self.store, self.sessions, today=lambda: TODAY)

    def say(self, *texts, sender=SENDER):
        """Envia as mensagens em sequência e retorna as respostas da última."""
        replies = []
        for text in texts:
            replies = self.conversation.handle_message(sender, text)
        return replies

    @property
    def step(self):
        return self.sessions.get(SENDER).step

    def open_menu(self):
        self.say("oi")


class TestMenu(ConversationTestCase):
    def test_first_message_shows_menu(self):
        self.assertEqual(self.say("registrar despesas"), [messages.MAIN_MENU])
        self.assertEqual(self.step, Step.WAITING_FOR_COMMAND)

    def test_unknown_command_reshows_menu(self):
        self.open_menu()
        self.assertEqual(self.say("bom dia"), [messages.UNKNOWN_COMMAND, messages.MAIN_MENU])
        self.assertEqual(self.step, Step.WAITING_FOR_COMMAND)

    def test_menu_and_voltar_escape_any_step(self):
        self.open_menu()
        self.say("Registrar Despesas", "Lazer")
        self.assertEqual(self.step, Step.WAITING_FOR_EXPENSE_DETAILS)
        self.assertEqual(self.say("VOLTAR"), [messages.MAIN_MENU])
        self.assertEqual(self.step, Step.WAITING_FOR_COMMAND)
        self.say("deletar")
        self.assertEqual(self.say("  Menu  "), [messages.MAIN_MENU])

    def test_daily_summary_without_expenses(self):
        self.open_menu()
        self.assertEqual(self.say("RESUMO DIÁRIO"), ["Ainda não foi adicionado nenhum gasto no dia de hoje!"])
        self.assertEqual(self.step, Step.INITIAL)

    def test_monthly_and_annual_summaries(self):
        self.store.write(db.EXPENSES, [make_expense()])
        self.open_menu()
        self.assertEqual(self.say("resumo mensal"), [reports.generate_monthly_summary([make_expense()], TODAY)])
        self.assertEqual(self.step, Step.INITIAL)
        self.open_menu()
        self.assertEqual(self.say("Resumo Anual"), [reports.generate_annual_summary([make_expense()], TODAY)])

    def test_uses_the_given_session_repository(self):
        self.open_menu()
        self.assertIs(self.conversation.sessions, self.sessions)
        self.assertEqual(len(self.sessions), 1)
        self.assertEqual(self.sessions.get(SENDER).step, Step.WAITING_FOR_COMMAND)

    def test_sessions_are_per_sender(self):
        self.open_menu()
        self.say("registrar receita")
        self.assertEqual(self.say("qualquer coisa", sender="outro"), [messages.MAIN_MENU])
        self.assertEqual(self.step, Step.WAITING_FOR_INCOME_DETAILS)

    def test_missing_handler_falls_back_to_menu(self):
        self.open_menu()
        with patch.dict("dedoduro.bot.conversation.STEP_HANDLERS", {}, clear=True):
            self.assertEqual(self.say("deletar"), [messages.NOT_UNDERSTOOD, messages.MAIN_MENU])


class TestExpenseFlow(ConversationTestCase):
    def start_expense(self, category="Alimentação", details="Mercado 120 reais"):
        self.open_menu()
        self.say("registrar despesas", category, details)

    def test_register_expense(self):
        self.start_expense()
        replies = self.say("pix")
        self.assertIn("ALIMENTAÇÃO", replies[0])
        self.assertIn("Mercado 120", replies[0])
        self.assertEqual(replies[1], messages.MAIN_MENU)
        self.assertEqual(db.get_expenses(self.store), [make_expense()])
        self.assertEqual(self.step, Step.WAITING_FOR_COMMAND)
        self.assertEqual(self.sessions.get(SENDER).context, {})

    def test_category_is_validated(self):
        self.open_menu()
        self.say("registrar despesas")
        self.assertEqual(self.say("Comida"), [messages.INVALID_CATEGORY])
        self.assertEqual(self.step, Step.WAITING_FOR_EXPENSE_CATEGORY)
        self.assertEqual(self.say("transporte"), [messages.ASK_EXPENSE_DETAILS])

    def test_payment_method_is_validated(self):
        self.start_expense()
        self.assertEqual(self.say("boleto"), [messages.INVALID_PAYMENT_METHOD])
        self.assertEqual(self.step, Step.WAITING_FOR_PAYMENT_METHOD)
        self.assertEqual(db.get_expenses(self.store), [])

    def test_payment_method_synonym_and_decimal_comma(self):
        self.start_expense("lazer", "Pizza 45,50")
        self.say("Credito")
        self.assertEqual(
            db.get_expenses(self.store),
            [make_expense("Pizza", 45.5, category="Lazer", method="cartão de crédito")],
        )

    def test_write_failure_still_confirms(self):
        self.start_expense("lazer", "Pizza 45")
        with patch.object(db.JsonStore, "write", return_value=False):
            with self.assertLogs("dedoduro.bot.handlers.handle_expense", level="ERROR"):
                replies = self.say("pix")
        self.assertTrue(replies[0].startswith("Adicionado a DESPESAS - LAZER"))
        self.assertEqual(replies[1], messages.MAIN_MENU)
        self.assertEqual(self.step, Step.WAITING_FOR_COMMAND)
        self.assertEqual(self.sessions.get(SENDER).context, {})
        self.assertEqual(db.get_expenses(self.store), [])

    def test_unparseable_details_keep_waiting_for_payment_method(self):
        self.start_expense(details="Mercado caro")
        self.assertEqual(self.say("pix"), [messages.EXPENSE_PARSE_FAILED])
        self.assertEqual(self.step, Step.WAITING_FOR_PAYMENT_METHOD)
        self.assertEqual(db.get_expenses(self.store), [])


class TestIncomeFlow(ConversationTestCase):
    def test_register_income(self):
        self.open_menu()
        self.say("registrar receita")
        replies = self.say("Salário: 3500,50 reais")
        self.assertTrue(replies[0].startswith("Adicionado Receita Salário: 3500.5 reais."))
        self.assertEqual(replies[1], messages.MAIN_MENU)
        self.assertEqual(
            db.get_incomes(self.store),
            [{"date": "2025-07-10", "description": "Salário", "amount": 3500.5}],
        )

    def test_income_write_failure_still_confirms(self):
        self.open_menu()
        self.say("registrar receita")
        with patch.object(db.JsonStore, "write", return_value=False):
            with self.assertLogs("dedoduro.bot.handlers.handle_income", level="ERROR"):
                replies = self.say("Salário: 3500")
        self.assertTrue(replies[0].startswith("Adicionado Receita Salário"))
        self.assertEqual(db.get_incomes(self.store), [])

    def test_income_without_colon_returns_to_menu(self):
        self.open_menu()
        self.say("registrar receita")
        self.assertEqual(self.say("Salário 3500"), [messages.INCOME_PARSE_FAILED, messages.MAIN_MENU])
        self.assertEqual(db.get_incomes(self.store), [])


class TestFixedEntryFlow(ConversationTestCase):
    def test_register_fixed_expense(self):
        self.open_menu()
        self.say("incluir despesas fixas")
        self.assertEqual(self.say("Aluguel 1500 reais"), [messages.ASK_DAY])
        replies = self.say("5")
        self.assertEqual(replies[0], "A despesa fixa de Aluguel todo dia 5 foi adicionada com sucesso!")
        self.assertEqual(
            db.get_fixed_entries(self.store, db.FIXED_EXPENSES),
            [{"description": "Aluguel", "amount": 1500.0, "day": 5}],
        )

    def test_fixed_entry_write_failure_still_confirms(self):
        self.open_menu()
        self.say("incluir despesas fixas", "Aluguel 1500")
        with patch.object(db.JsonStore, "write", return_value=False):
            with self.assertLogs("dedoduro.bot.handlers.handle_fixed_entry", level="ERROR"):
                replies = self.say("5")
        self.assertEqual(replies[0], "A despesa fixa de Aluguel todo dia 5 foi adicionada com sucesso!")
        self.assertEqual(db.get_fixed_entries(self.store, db.FIXED_EXPENSES), [])

    def test_invalid_day_does_not_advance(self):
        self.open_menu()
        self.say("incluir despesas fixas", "Aluguel 1500")
        for invalid in ["0", "32", "abc"]:
            self.assertEqual(self.say(invalid), [messages.INVALID_DAY])
            self.assertEqual(self.step, Step.WAITING_FOR_FIXED_EXPENSE_DAY)
        self.assertEqual(db.get_fixed_entries(self.store, db.FIXED_EXPENSES), [])

    def test_register_fixed_income(self):
        self.open_menu()
        self.say("Incluir Receitas Fixas", "Salário 5000,00")
        replies = self.say("31")
        self.assertEqual(replies[0], "A receita fixa de Salário todo dia 31 foi adicionada com sucesso!")
        self.assertEqual(
            db.get_fixed_entries(self.store, db.FIXED_INCOMES),
            [{"description": "Salário", "amount": 5000.0, "day": 31}],
        )

    def test_unparseable_fixed_entry_returns_to_menu(self):
        self.open_menu()
        self.say("incluir receitas fixas", "Salário")
        self.assertEqual(self.say("5"), [messages.FIXED_INCOME_PARSE_FAILED, messages.MAIN_MENU])
        self.assertEqual(db.get_fixed_entries(self.store, db.FIXED_INCOMES), [])


class TestDeleteFlow(ConversationTestCase):
    def test_invalid_delete_option(self):
        self.open_menu()
        self.say("deletar")
        self.assertEqual(self.say("receita"), [messages.INVALID_DELETE_OPTION])
        self.assertEqual(self.step, Step.WAITING_FOR_DELETE_OPTION)

    def test_delete_expense_by_date_and_index(self):
        self.store.write(db.EXPENSES, [make_expense("Mercado"), make_expense("Padaria", 10.0)])
        self.open_menu()
        self.say("deletar", "despesa")
        listing = self.say("10/07/2025")
        self.assertEqual(
            listing,
            [
                "Escolha a despesa que deseja deletar:\n\n"
                "1. Alimentação - Mercado - R$ 120.00 (pix)\n"
                "2. Alimentação - Padaria - R$ 10.00 (pix)\n"
            ],
        )
        self.assertEqual(self.step, Step.WAITING_FOR_EXPENSE_INDEX)
        replies = self.say("1")
        self.assertEqual(replies[0], 'Despesa "Mercado" de R$ 120.00 excluída com sucesso!')
        self.assertEqual(db.get_expenses(self.store), [make_expense("Padaria", 10.0)])

    def test_delete_expense_removes_identical_duplicates(self):
        self.store.write(db.EXPENSES, [make_expense(), make_expense()])
        self.open_menu()
        self.say("deletar", "despesa", "10/7/2025", "1")
        self.assertEqual(db.get_expenses(self.store), [])

    def test_no_expenses_on_date(self):
        self.open_menu()
        self.say("deletar", "despesa")
        self.assertEqual(self.say("01/01/2025"), [messages.NO_EXPENSES_ON_DATE, messages.MAIN_MENU])

    def test_invalid_date_reprompts(self):
        self.open_menu()
        self.say("deletar", "despesa")
        self.assertEqual(self.say("ontem"), [messages.INVALID_DATE])
        self.assertEqual(self.step, Step.WAITING_FOR_EXPENSE_DATE)

    def test_invalid_expense_index(self):
        self.store.write(db.EXPENSES, [make_expense()])
        self.open_menu()
        self.say("deletar", "despesa", "10/07/2025")
        self.assertEqual(self.say("2"), [messages.INVALID_INDEX])
        self.assertEqual(self.step, Step.WAITING_FOR_EXPENSE_INDEX)
        self.assertEqual(db.get_expenses(self.store), [make_expense()])

    def test_delete_fixed_expense_by_position(self):
        entries = [
            {"description": "Aluguel", "amount": 1500.0, "day": 5},
            {"description": "Internet", "amount": 100.0, "day": 10},
            {"description": "Academia", "amount": 90.0, "day": 15},
        ]
        self.store.write(db.FIXED_EXPENSES, entries)
        self.open_menu()
        self.say("deletar")
        listing = self.say("Despesa Fixa")
        self.assertIn("2. Internet - R$ 100.00 (Dia 10)\n", listing[0])
        replies = self.say("2")
        self.assertEqual(replies[0], 'Despesa fixa "Internet" de R$ 100.00 excluída com sucesso!')
        self.assertEqual(db.get_fixed_entries(self.store, db.FIXED_EXPENSES), [entries[0], entries[2]])

    def test_delete_fixed_income_invalid_index(self):
        entries = [{"description": "Salário", "amount": 5000.0, "day": 5}]
        self.store.write(db.FIXED_INCOMES, entries)
        self.open_menu()
        self.say("deletar", "receita fixa")
        self.assertEqual(self.say("abc"), [messages.INVALID_INDEX])
        self.assertEqual(self.step, Step.WAITING_FOR_FIXED_INCOME_INDEX)
        self.say("1")
        self.assertEqual(db.get_fixed_entries(self.store, db.FIXED_INCOMES), [])

    def test_no_fixed_incomes(self):
        self.open_menu()
        self.say("deletar")
        self.assertEqual(self.say("receita fixa"), [messages.NO_FIXED_INCOMES, messages.MAIN_MENU])


if __name__ == "__main__":
    unittest.main()
