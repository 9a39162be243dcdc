import pytest

from app.core import word_lists
from app.core.config import get_settings
from app.core.word_lists import WordListError, get_word_matcher, load_word_list
from app.services.word_matcher import Classification


@pytest.mark.unit
class TestLoadWordList:
    """Test reading word list files"""

    def test_load_skips_comments_and_blanks(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("# header\n\nSpam\n  scam  \n# casino\n", encoding="utf-8")

        assert load_word_list(path) == frozenset({"spam", "scam"})

    def test_load_unicode_words(self, tmp_path):
        path = tmp_path / "words.txt"
        path.write_text("Реклама\nспам\n", encoding="utf-8")

        assert load_word_list(path) == frozenset({"реклама", "спам"})

    def test_empty_file_gives_empty_set(self, tmp_path):
        path = tmp_path / "empty.txt"
        path.write_text("", encoding="utf-8")

        assert load_word_list(path) == frozenset()

    def test_missing_file_raises(self, tmp_path):
        with pytest.raises(WordListError):
            load_word_list(tmp_path / "missing.txt")

    def test_packaged_lists_load(self):
        settings = get_settings()
        forbidden = load_word_list(settings.FORBIDDEN_WORDS_FILE)
        unnecessary = load_word_list(settings.UNNECESSARY_WORDS_FILE)

        assert "spam" in forbidden
        assert "test" in unnecessary
        assert not forbidden & unnecessary


@pytest.mark.unit
class TestGetWordMatcher:
    """Test building the matcher from settings"""

    @pytest.fixture(autouse=True)
    def clear_caches(self):
        get_settings.cache_clear()
        get_word_matcher.cache_clear()
        yield
        get_settings.cache_clear()
        get_word_matcher.cache_clear()

    def test_matcher_uses_configured_files(self, tmp_path, monkeypatch):
        forbidden = tmp_path / "forbidden.txt"
        forbidden.write_text("meeting\n", encoding="utf-8")
        unnecessary = tmp_path / "unnecessary.txt"
        unnecessary.write_text("party\n", encoding="utf-8")
        monkeypatch.setenv("FORBIDDEN_WORDS_FILE", str(forbidden))
        monkeypatch.setenv("UNNECESSARY_WORDS_FILE", str(unnecessary))

        matcher = get_word_matcher()

        assert matcher.classify("Team meeting", "") is Classification.BLOCKED
        assert matcher.classify("Birthday party", "") is Classification.NEEDS_REVIEW
        assert get_word_matcher() is matcher

    def test_missing_configured_file_is_fatal(self, tmp_path, monkeypatch):
        monkeypatch.setenv("FORBIDDEN_WORDS_FILE", str(tmp_path / "nope.txt"))

        with pytest.raises(WordListError):
            word_lists.get_word_matcher()
