from typing import List, Optional

from telegram import ReactionType, ReactionTypeCustomEmoji, ReactionTypeEmoji, Update
from telegram.error import TelegramError
from telegram.ext import ContextTypes

from .config import MAX_REACTIONS
from .emoji import CustomEmoji, EmojiCatalog, EmojiScanner, EmojiToken


EMOJI_CATALOG: Optional[EmojiCatalog] = None


def set_catalog(catalog: EmojiCatalog) -> None:
    global EMOJI_CATALOG
    EMOJI_CATALOG = catalog


def get_catalog() -> EmojiCatalog:
    if EMOJI_CATALOG is None:
        raise RuntimeError("Каталог эмодзи не загружен")
    return EMOJI_CATALOG


def to_reaction(token: EmojiToken) -> ReactionType:
    if isinstance(token, CustomEmoji):
        return ReactionTypeCustomEmoji(custom_emoji_id=str(token.id))
    return ReactionTypeEmoji(emoji=token.emoji)


def pick_reactions(text: str, limit: int = MAX_REACTIONS) -> List[EmojiToken]:
    """Первые limit разных эмодзи из текста, в порядке появления"""
    picked: List[EmojiToken] = []
    for token in EmojiScanner(text, get_catalog()):
        if len(picked) >= limit:
            break
        if token not in picked:
            picked.append(token)
    return picked


def format_token(token: EmojiToken) -> str:
    if isinstance(token, CustomEmoji):
        return f"<:{token.name}:{token.id}> (id {token.id})"
    return f"{token.emoji} ({'-'.join(f'{ord(ch):x}' for ch in token.emoji)})"


async def cmd_start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(
        "Привет! Я ставлю реакции эмодзи, которые нахожу в сообщениях.\n"
        "Команды: /emoji <текст> — показать найденные эмодзи, /help — помощь."
    )


async def cmd_help(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(
        "Я понимаю обычные эмодзи (🏳️‍🌈, 👍 и т.д.) и кастомные вида <:name:123456>.\n"
        "/emoji <текст> — список эмодзи в тексте по порядку."
    )


async def cmd_emoji(update: Update, context: ContextTypes.DEFAULT_TYPE):
    parts = (update.message.text or "").split(None, 1)
    text = parts[1] if len(parts) > 1 else ""
    if not text.strip():
        await update.message.reply_text("Формат: /emoji <текст>")
        return
    tokens = list(EmojiScanner(text, get_catalog()))
    if not tokens:
        await update.message.reply_text("Эмодзи не найдено.")
        return
    lines = "\n".join(f"{i+1}. {format_token(t)}" for i, t in enumerate(tokens))
    await update.message.reply_text(f"Найдено эмодзи: {len(tokens)}\n{lines}")


async def on_text(update: Update, context: ContextTypes.DEFAULT_TYPE):
    msg = update.message
    if not msg or not msg.text:
        return

    tokens = pick_reactions(msg.text)
    if not tokens:
        return

    try:
        await msg.set_reaction(reaction=[to_reaction(t) for t in tokens])
    except TelegramError as e:
        # Telegram принимает не все эмодзи в качестве реакции
        print(f"[WARNING] Не удалось поставить реакцию в чате {msg.chat_id}: {e}")
