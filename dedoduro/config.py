# dedoduro/config.py
import os
import datetime
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

load_dotenv()

# Configurações do Telegram
TELEGRAM_BOT_TOKEN = os.getenv("TELEGRAM_BOT_TOKEN")
BOT_MODE = os.getenv("BOT_MODE", "polling")  # "polling" ou "webhook" (webhook já registrado no Telegram)
PORT = int(os.getenv("PORT", "3000"))

# Pasta onde ficam os arquivos JSON
DATA_DIR = os.getenv("DATA_DIR", os.path.join(os.getcwd(), "data"))

# Fuso horário usado para decidir o que é "hoje"
BOT_TIMEZONE = os.getenv("BOT_TIMEZONE", "America/Sao_Paulo")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def today() -> datetime.date:
    """Data atual no fuso horário configurado."""
    return datetime.datetime.now(ZoneInfo(BOT_TIMEZONE)).date()
