# shared/config/env_loader.py
from pathlib import Path
from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[2]  # points to repo root
SHARED_ENV = ROOT_DIR / ".env"

# Load shared env once, without overriding values already in the environment
load_dotenv(SHARED_ENV, override=False)


def load_bot_env(bot_name: str) -> Path:
    """
    Load a bot's own .env on top of the shared one.

    Values already present in the environment win, so tests and deployment
    settings are never clobbered by a stray .env file.

    Returns:
        Path of the bot .env file (which may not exist)
    """
    bot_env = ROOT_DIR / bot_name / '.env'
    if bot_env.exists():
        load_dotenv(bot_env, override=False)
    return bot_env
