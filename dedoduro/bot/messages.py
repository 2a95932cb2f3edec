# dedoduro/bot/messages.py
# Textos enviados pelo bot

MAIN_MENU = (
    "Olá sou seu DEDO DURO! Como posso te ajudar?\n\n"
    "- Registrar Despesas\n"
    "- Registrar Receita\n"
    "- Resumo Diário\n"
    "- Resumo Mensal\n"
    "- Resumo Anual\n"
    "- Incluir Despesas Fixas\n"
    "- Incluir Receitas Fixas\n"
    "- DELETAR"
)

UNKNOWN_COMMAND = "Comando não reconhecido. Por favor, escolha uma das opções:"
NOT_UNDERSTOOD = "Não entendi sua mensagem. Por favor, escolha uma das opções:"
GENERIC_ERROR = "Ocorreu um erro ao processar sua solicitação. Por favor, tente novamente."

CATEGORY_OPTIONS = "- Alimentação\n- Transporte\n- Moradia\n- Lazer\n- Assinaturas\n- Outros"
ASK_EXPENSE_CATEGORY = "Em qual categoria se enquadra sua despesa?\n\n" + CATEGORY_OPTIONS
INVALID_CATEGORY = "Categoria inválida. Por favor, escolha uma das seguintes opções:\n\n" + CATEGORY_OPTIONS
ASK_EXPENSE_DETAILS = "Qual despesa você quer adicionar?"

PAYMENT_OPTIONS = "- Dinheiro\n- PIX\n- Cartão de Crédito\n- Cartão de Débito"
ASK_PAYMENT_METHOD = "Como foi pago?\n\n" + PAYMENT_OPTIONS
INVALID_PAYMENT_METHOD = "Método de pagamento inválido. Por favor, escolha uma das seguintes opções:\n\n" + PAYMENT_OPTIONS
EXPENSE_PARSE_FAILED = (
    "Não consegui identificar corretamente a descrição e o valor. "
    "Por favor, tente novamente usando o formato: 'Descrição valor reais'"
)
EXPENSE_ADDED = "Adicionado a DESPESAS - {category}, o item {description} {amount} reais. ECONOMIZA MEU FILHO!"

ASK_INCOME_DETAILS = "Qual receita você quer adicionar?"
INCOME_PARSE_FAILED = (
    "Não consegui identificar corretamente a descrição e o valor. "
    "Por favor, tente novamente usando o formato: 'Descrição: valor reais'"
)
INCOME_ADDED = "Adicionado Receita {description}: {amount} reais. PARABENS CRIATURA, SEMPRE NA BUSCA DE MAIS DINDIN $$$"

ASK_FIXED_EXPENSE_DETAILS = "Qual a despesa fixa que você deseja incluir?"
ASK_FIXED_INCOME_DETAILS = "Qual a receita fixa que você deseja incluir?"
ASK_DAY = "Em que dia do mês?"
INVALID_DAY = "Por favor, informe um dia válido entre 1 e 31."
FIXED_EXPENSE_PARSE_FAILED = (
    "Não consegui identificar corretamente a descrição e o valor da despesa fixa. "
    "Por favor, tente novamente no formato: 'Descrição valor reais'"
)
FIXED_INCOME_PARSE_FAILED = (
    "Não consegui identificar corretamente a descrição e o valor da receita fixa. "
    "Por favor, tente novamente no formato: 'Descrição valor reais'"
)
FIXED_EXPENSE_ADDED = "A despesa fixa de {description} todo dia {day} foi adicionada com sucesso!"
FIXED_INCOME_ADDED = "A receita fixa de {description} todo dia {day} foi adicionada com sucesso!"

DELETE_OPTIONS = "- Despesa\n- Despesa fixa\n- Receita fixa"
ASK_DELETE_OPTION = "O que você deseja deletar?\n\n" + DELETE_OPTIONS
INVALID_DELETE_OPTION = "Opção inválida. Por favor, escolha entre:\n\n" + DELETE_OPTIONS
ASK_EXPENSE_DATE = "Em que dia a despesa foi incluída? (formato: DD/MM/YYYY)"
INVALID_DATE = "Formato de data inválido. Por favor, utilize o formato DD/MM/YYYY."
NO_EXPENSES_ON_DATE = "Não há despesas registradas para esta data."
NO_FIXED_EXPENSES = "Não há despesas fixas cadastradas."
NO_FIXED_INCOMES = "Não há receitas fixas cadastradas."
CHOOSE_EXPENSE = "Escolha a despesa que deseja deletar:\n\n"
CHOOSE_FIXED_EXPENSE = "Escolha a despesa fixa que deseja deletar:\n\n"
CHOOSE_FIXED_INCOME = "Escolha a receita fixa que deseja deletar:\n\n"
INVALID_INDEX = "Índice inválido. Por favor, escolha um número válido da lista."
EXPENSE_DELETED = 'Despesa "{description}" de R$ {amount} excluída com sucesso!'
FIXED_EXPENSE_DELETED = 'Despesa fixa "{description}" de R$ {amount} excluída com sucesso!'
FIXED_INCOME_DELETED = 'Receita fixa "{description}" de R$ {amount} excluída com sucesso!'

HELP = (
    "Eu anoto suas despesas e receitas. Mande qualquer mensagem para ver o menu.\n\n"
    "- Digite o nome da opção do menu para escolhê-la (ex: 'Registrar Despesas').\n"
    "- Despesas: 'Mercado 120 reais'.\n"
    "- Receitas: 'Salário: 3500 reais'.\n"
    "- A qualquer momento, digite 'menu' ou 'voltar' para recomeçar."
)
