import os

from dotenv import load_dotenv

load_dotenv()

DEFAULT_PRIMARY_CURRENCY = os.getenv("PRIMARY_CURRENCY", "USD").strip().upper()

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()

# Dashboard list sizes
RECENT_TRANSACTIONS_LIMIT = int(os.getenv("RECENT_TRANSACTIONS_LIMIT", "5"))
OUTSTANDING_BALANCES_LIMIT = int(os.getenv("OUTSTANDING_BALANCES_LIMIT", "6"))
