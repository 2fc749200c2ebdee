#!/usr/bin/env python3
"""
Скрипт для создания файла .env
"""

import os

def create_env_file():
    """Создает файл .env с базовыми настройками"""

    env_content = """# Telegram Bot Token (получите у @BotFather)
TELEGRAM_BOT_TOKEN=your_bot_token_here

# Каталог svg-файлов twemoji (например, assets/svg из репозитория twitter/twemoji)
EMOJI_ASSETS_DIR=/opt/git/github.com/twitter/twemoji/master/2/svg

# Сколько реакций ставить на одно сообщение (опционально)
EMOJI_MAX_REACTIONS=1
"""

    if os.path.exists('.env'):
        print("⚠️  Файл .env уже существует!")
        response = input("Перезаписать? (y/N): ")
        if response.lower() != 'y':
            print("Отменено.")
            return

    with open('.env', 'w', encoding='utf-8') as f:
        f.write(env_content)

    print("✅ Файл .env создан!")
    print("\n📝 Что нужно сделать:")
    print("1. Получите токен бота у @BotFather")
    print("2. Укажите путь к svg-файлам twemoji")
    print("3. Перезапустите бота")

if __name__ == "__main__":
    create_env_file()
