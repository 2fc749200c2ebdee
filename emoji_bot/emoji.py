import os
import re
import sys
from typing import Dict, FrozenSet, Iterable, Iterator, List, NamedTuple, Optional, Tuple, Union

# Имена файлов twemoji: 1f3f3-fe0f-200d-1f308.svg
TWEMOJI_FILENAME_RE = re.compile(r"([0-9a-f]{1,6}(?:-[0-9a-f]{1,6})*)\.svg")
# Кастомные эмодзи: <:lrrJUDGE:289173939802996736>
CUSTOM_EMOJI_RE = re.compile(r"<:([0-9A-Za-z_]{2,}):([0-9]+)>")

MAX_EMOJI_ID = 2 ** 64 - 1
_END = ""  # маркер конца записи в дереве префиксов


class EmojiError(Exception):
    pass


class FilenameDecodeError(EmojiError):
    def __init__(self, raw_name: bytes):
        super().__init__(f"failed to read twemoji filename: {raw_name!r}")
        self.raw_name = raw_name


class CatalogIOError(EmojiError):
    def __init__(self, error: OSError):
        super().__init__(f"io error while building emoji db: {error}")
        self.error = error


class CustomIdParseError(EmojiError, ValueError):
    def __init__(self, raw_id: str):
        super().__init__(f"custom emoji id does not fit in 64 bits: {raw_id}")
        self.raw_id = raw_id


class CustomEmoji(NamedTuple):
    id: int
    name: str


class UnicodeEmoji(NamedTuple):
    emoji: str


EmojiToken = Union[CustomEmoji, UnicodeEmoji]


class EmojiCatalog:
    """Неизменяемый набор известных эмодзи с деревом префиксов для поиска самого длинного совпадения."""

    __slots__ = ("_entries", "_tree", "_max_len")

    def __init__(self, entries: Iterable[str] = ()):
        self._entries: FrozenSet[str] = frozenset(e for e in entries if e)
        self._tree: Dict[str, dict] = {}
        self._max_len = 0
        for emoji in self._entries:
            node = self._tree
            for ch in emoji:
                node = node.setdefault(ch, {})
            node[_END] = emoji
            self._max_len = max(self._max_len, len(emoji))

    @property
    def entries(self) -> FrozenSet[str]:
        return self._entries

    @property
    def max_length(self) -> int:
        return self._max_len

    def __contains__(self, emoji: object) -> bool:
        return emoji in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EmojiCatalog):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"EmojiCatalog({len(self._entries)} entries)"

    def longest_prefix(self, text: str, pos: int = 0) -> Optional[str]:
        """Самая длинная запись каталога, с которой начинается text[pos:], или None."""
        node = self._tree
        best = None
        for i in range(pos, len(text)):
            node = node.get(text[i])
            if node is None:
                break
            if _END in node:
                best = node[_END]
        return best


def decode_filename(name: str) -> Optional[str]:
    """1f3f3-fe0f-200d-1f308.svg -> 🏳️‍🌈. None, если имя не похоже на эмодзи или содержит неверную кодовую точку."""
    m = TWEMOJI_FILENAME_RE.fullmatch(name)
    if not m:
        return None
    chars: List[str] = []
    for group in m.group(1).split("-"):
        code = int(group, 16)
        # суррогаты и значения за U+10FFFF не являются скалярными значениями
        if code > 0x10FFFF or 0xD800 <= code <= 0xDFFF:
            return None
        chars.append(chr(code))
    return "".join(chars)


def build_catalog(directory: Union[str, os.PathLike]) -> EmojiCatalog:
    encoding = sys.getfilesystemencoding()
    found = set()
    try:
        with os.scandir(os.fsencode(directory)) as it:
            for entry in it:
                try:
                    name = entry.name.decode(encoding, errors="strict")
                except UnicodeDecodeError as e:
                    raise FilenameDecodeError(entry.name) from e
                emoji = decode_filename(name)
                if emoji is not None:
                    found.add(emoji)
                elif TWEMOJI_FILENAME_RE.fullmatch(name):
                    print(f"[WARNING] Пропущен файл с неверной кодовой точкой: {name}")
    except OSError as e:
        raise CatalogIOError(e) from e
    return EmojiCatalog(found)


def _custom_from_match(m: "re.Match[str]") -> CustomEmoji:
    raw_id = m.group(2)
    # длинные строки цифр не переводим в int: у int() есть лимит на число цифр
    digits = raw_id.lstrip("0") or "0"
    if len(digits) > len(str(MAX_EMOJI_ID)):
        raise CustomIdParseError(raw_id)
    emoji_id = int(digits)
    if emoji_id > MAX_EMOJI_ID:
        raise CustomIdParseError(raw_id)
    return CustomEmoji(id=emoji_id, name=m.group(1))


def parse_custom_emoji(text: str) -> Optional[CustomEmoji]:
    """Разбирает строку целиком вида <:name:id>. Вложенные в длинный текст эмодзи не распознаются."""
    m = CUSTOM_EMOJI_RE.fullmatch(text)
    if not m:
        return None
    return _custom_from_match(m)


def iter_segments(text: str, catalog: EmojiCatalog) -> Iterator[Tuple[str, Optional[EmojiToken]]]:
    """Делит текст на куски: найденные эмодзи с токеном и пропущенные символы с None.

    Склейка всех кусков по порядку даёт исходный текст.
    """
    pos = 0
    end = len(text)
    while pos < end:
        m = CUSTOM_EMOJI_RE.match(text, pos)
        if m:
            try:
                token = _custom_from_match(m)
            except CustomIdParseError:
                pass
            else:
                yield m.group(0), token
                pos = m.end()
                continue

        emoji = catalog.longest_prefix(text, pos)
        if emoji is not None:
            yield emoji, UnicodeEmoji(emoji)
            pos += len(emoji)
            continue

        yield text[pos], None
        pos += 1


class EmojiScanner:
    """Ленивый однопроходный итератор по эмодзи в тексте. Повторно не запускается."""

    def __init__(self, text: str, catalog: EmojiCatalog):
        self._segments = iter_segments(text, catalog)

    def __iter__(self) -> "EmojiScanner":
        return self

    def __next__(self) -> EmojiToken:
        for _, token in self._segments:
            if token is not None:
                return token
        raise StopIteration


def scan(text: str, catalog: EmojiCatalog) -> List[EmojiToken]:
    return list(EmojiScanner(text, catalog))
