from telegram.ext import (
    ApplicationBuilder,
    CommandHandler,
    MessageHandler,
    filters,
)

from .config import EMOJI_ASSETS_DIR, TOKEN
from .emoji import EmojiError, build_catalog
from .handlers import (
    cmd_emoji,
    cmd_help,
    cmd_start,
    on_text,
    set_catalog,
)


def main():
    # Каталог строится один раз при запуске и дальше только читается
    try:
        catalog = build_catalog(EMOJI_ASSETS_DIR)
    except EmojiError as e:
        raise RuntimeError(f"Не удалось загрузить эмодзи из {EMOJI_ASSETS_DIR}: {e}") from e
    set_catalog(catalog)
    print(f"Загружено эмодзи: {len(catalog)} из {EMOJI_ASSETS_DIR}")

    if not TOKEN:
        raise RuntimeError("Нужен TELEGRAM_BOT_TOKEN")

    app = ApplicationBuilder().token(TOKEN).build()
    app.add_handler(CommandHandler("start", cmd_start))
    app.add_handler(CommandHandler("help", cmd_help))
    app.add_handler(CommandHandler("emoji", cmd_emoji))
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, on_text))

    print("Бот запущен.")
    app.run_polling()


if __name__ == "__main__":
    main()
