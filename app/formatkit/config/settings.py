from pathlib import Path
from typing import Optional
from dotenv import find_dotenv, load_dotenv
import os
import pytz

PROJECT_ENV_FILE = Path(__file__).resolve().parent.parent.parent.parent / '.env'

def env_file_path(project_env: Path = PROJECT_ENV_FILE) -> str:
    # Checkout/editable install: project root .env; installed package: nearest .env above cwd
    if project_env.is_file():
        return str(project_env)
    return find_dotenv(usecwd=True)

load_dotenv(env_file_path(), override=True)

def env_bool(name: str, default: bool = False) -> bool:
    return str(os.getenv(name, str(default))).strip().lower() in {"1", "true", "yes", "on", "y", "t"}

def env_int(name: str, default: int) -> int:
    value = os.getenv(name, "").strip()
    return int(value) if value.lstrip("-").isdigit() else default

def server_timezone(name: Optional[str]):
    # None means the host's local time, resolved per instant
    return pytz.timezone(name) if name else None

class Settings:
    # Timezone used to resolve calendar fields; unset follows the host's local zone
    SERVER_TZ = server_timezone(os.getenv('SERVER_TZ'))

    # Date formatting
    DEFAULT_DATE_FORMAT = os.getenv('DEFAULT_DATE_FORMAT', 'd/m/Y H:i')
    INVALID_DATE_TEXT = os.getenv('INVALID_DATE_TEXT', 'Invalid Date')

    # Strings
    RANDOM_STRING_LENGTH = env_int('RANDOM_STRING_LENGTH', 5)

    # Directories
    BASE_DIR = Path(os.getenv('FORMATKIT_HOME', str(Path.home() / '.formatkit'))).expanduser()

    # Logs
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
    LOG_TO_FILE = env_bool("LOG_TO_FILE", False)
    LOGS_DIR = BASE_DIR / "logs"
    LOG_FILE = LOGS_DIR / "errors.log"
