import os
from dataclasses import dataclass
from dotenv import load_dotenv

load_dotenv()

@dataclass
class Settings:
    # Identifiers
    first_id: int = int(os.getenv("BOOKLEDGER_FIRST_ID", "1000"))

    # Text encodings
    date_format: str = os.getenv("BOOKLEDGER_DATE_FORMAT", "%d-%m-%Y")
    donation_separator: str = os.getenv("BOOKLEDGER_DONATION_SEPARATOR", ",")
    not_available: str = "Not available"
    ongoing_marker: str = "ONGOING"

    # Logging
    log_level: str = os.getenv("BOOKLEDGER_LOG_LEVEL", "INFO")


settings = Settings()
