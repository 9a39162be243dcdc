"""Loading of the content filter word lists."""
import logging
from functools import lru_cache
from pathlib import Path

from app.core.config import get_settings
from app.services.word_matcher import WordMatcher

logger = logging.getLogger(__name__)


class WordListError(RuntimeError):
    """A configured word list could not be read."""


def load_word_list(path: Path | str) -> frozenset[str]:
    """
    Read a word list file: one word per line, UTF-8.

    Blank lines and lines starting with ``#`` are skipped; words are
    stripped and lower-cased.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise WordListError(f"Cannot read word list {path}: {exc}") from exc

    words = set()
    for line in raw.splitlines():
        word = line.strip()
        if not word or word.startswith("#"):
            continue
        words.add(word.lower())

    if not words:
        logger.warning("Word list %s is empty", path)
    logger.info("Loaded %d words from %s", len(words), path)
    return frozenset(words)


@lru_cache
def get_word_matcher() -> WordMatcher:
    """Build the process-wide matcher from the configured word lists."""
    settings = get_settings()
    return WordMatcher(
        forbidden_words=load_word_list(settings.FORBIDDEN_WORDS_FILE),
        unnecessary_words=load_word_list(settings.UNNECESSARY_WORDS_FILE),
    )
