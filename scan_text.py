import sys

from emoji_bot.emoji import CustomEmoji, EmojiError, build_catalog, iter_segments


def main():
    if len(sys.argv) < 3:
        print("Usage: python scan_text.py assets_dir text [text ...]")
        sys.exit(1)
    try:
        catalog = build_catalog(sys.argv[1])
    except EmojiError as e:
        print(f"Ошибка загрузки каталога: {e}")
        sys.exit(1)
    print(f"Эмодзи в каталоге: {len(catalog)}")

    text = " ".join(sys.argv[2:])
    skipped = 0
    found = 0
    for chunk, token in iter_segments(text, catalog):
        if token is None:
            skipped += 1
        elif isinstance(token, CustomEmoji):
            found += 1
            print(f"  custom  {token.name} {token.id}")
        else:
            found += 1
            print(f"  unicode {token.emoji} {'-'.join(f'{ord(ch):x}' for ch in chunk)}")
    print(f"Готово: найдено {found}, пропущено символов {skipped}")


if __name__ == "__main__":
    main()
