import os
from dotenv import load_dotenv

# Загружаем переменные из .env файла
load_dotenv()

# Каталог с svg-файлами twemoji (имя файла = кодовые точки эмодзи)
EMOJI_ASSETS_DIR = os.getenv("EMOJI_ASSETS_DIR", "/opt/git/github.com/twitter/twemoji/master/2/svg")

# Telegram
TOKEN = os.environ.get("TELEGRAM_BOT_TOKEN")

# Сколько реакций ставить на одно сообщение
DEFAULT_MAX_REACTIONS = 1
max_reactions_str = os.getenv("EMOJI_MAX_REACTIONS")
if max_reactions_str is None:
    MAX_REACTIONS = DEFAULT_MAX_REACTIONS
else:
    try:
        MAX_REACTIONS = int(max_reactions_str)
        if MAX_REACTIONS < 1:
            raise ValueError(max_reactions_str)
    except ValueError:
        print(f"[ERROR] Неверный формат EMOJI_MAX_REACTIONS: {max_reactions_str}")
        print(f"[INFO] Должно быть положительное число, используем {DEFAULT_MAX_REACTIONS}")
        MAX_REACTIONS = DEFAULT_MAX_REACTIONS
