"""
Test suite for the work keyword list.
"""

import json
import pytest

from keywords import KeywordList, InvalidKeywordFile, DEFAULT_KEYWORDS, filter_keywords


class TestLoad:
    """Test reading the saved keyword file."""

    def test_missing_file_gives_defaults(self, tmp_path):
        keywords = KeywordList.load(str(tmp_path / 'missing.json'))
        assert list(keywords) == DEFAULT_KEYWORDS

    def test_saved_order_is_kept(self, tmp_path):
        path = tmp_path / 'k.json'
        path.write_text(json.dumps(['SQL', 'Excel']), encoding='utf-8')
        assert list(KeywordList.load(str(path))) == ['SQL', 'Excel']

    def test_repeated_keywords_keep_first_position(self, tmp_path):
        path = tmp_path / 'k.json'
        path.write_text(json.dumps(['SQL', 'Excel', 'SQL', 'Go']), encoding='utf-8')
        assert list(KeywordList.load(str(path))) == ['SQL', 'Excel', 'Go']

    def test_empty_list_is_valid(self, tmp_path):
        path = tmp_path / 'k.json'
        path.write_text('[]', encoding='utf-8')
        assert len(KeywordList.load(str(path))) == 0

    @pytest.mark.parametrize('content', ['{not json', '{"a": 1}', '[1, 2]', '["ok", ""]'])
    def test_malformed_file_raises(self, tmp_path, content):
        path = tmp_path / 'k.json'
        path.write_text(content, encoding='utf-8')
        with pytest.raises(InvalidKeywordFile):
            KeywordList.load(str(path))

    def test_load_or_default_reports_error(self, tmp_path):
        path = tmp_path / 'k.json'
        path.write_text('"just a string"', encoding='utf-8')
        keywords, error = KeywordList.load_or_default(str(path))
        assert list(keywords) == DEFAULT_KEYWORDS
        assert isinstance(error, InvalidKeywordFile)


class TestEditing:
    """Test adding, removing and saving keywords."""

    def test_add_strips_and_appends(self):
        keywords = KeywordList(['SQL'])
        assert keywords.add('  Excel ')
        assert list(keywords) == ['SQL', 'Excel']

    def test_add_rejects_blank_and_duplicate(self):
        keywords = KeywordList(['SQL'])
        assert not keywords.add('   ')
        assert not keywords.add('SQL')
        assert list(keywords) == ['SQL']

    def test_remove(self):
        keywords = KeywordList(['SQL', 'Excel'])
        assert keywords.remove('SQL')
        assert not keywords.remove('SQL')
        assert 'SQL' not in keywords

    def test_save_then_load(self, tmp_path):
        path = str(tmp_path / 'nested' / 'k.json')
        keywords = KeywordList(['SQL'])
        keywords.add('Python')
        keywords.save(path)
        assert list(KeywordList.load(path)) == ['SQL', 'Python']


class TestFilterKeywords:
    def test_union_of_managed_and_used(self):
        achievements = [{'skills': ['Go']}, {'skills': None}, {'skills': ['SQL']}]
        assert filter_keywords(['SQL', 'Excel'], achievements) == ['Excel', 'Go', 'SQL']
