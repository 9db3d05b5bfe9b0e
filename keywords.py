"""Keyword tags offered when tagging work achievements."""

import json
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_KEYWORDS = [
    'Communication',
    'Data Analysis',
    'Leadership',
    'Problem Solving',
    'Process Improvement',
    'Project Management',
    'Teamwork',
]


class InvalidKeywordFile(ValueError):
    pass


class KeywordList:
    def __init__(self, keywords=None):
        # saved order is kept; duplicates after the first are dropped
        self.keywords = list(dict.fromkeys(keywords if keywords is not None else DEFAULT_KEYWORDS))

    def __iter__(self):
        return iter(self.keywords)

    def __len__(self):
        return len(self.keywords)

    def __contains__(self, keyword):
        return keyword in self.keywords

    @classmethod
    def load(cls, path):
        """
        Read the list saved at ``path``.

        A missing file means the defaults. A file that is not a JSON array of
        non-empty strings raises InvalidKeywordFile; an empty array is valid.
        """
        if not os.path.exists(path):
            return cls()
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            raise InvalidKeywordFile(f"{path}: {e}") from e

        if not isinstance(data, list) or not all(isinstance(k, str) and k.strip() for k in data):
            raise InvalidKeywordFile(f"{path}: expected a JSON array of keywords")
        return cls([k.strip() for k in data])

    @classmethod
    def load_or_default(cls, path):
        """Like load(), but falls back to the defaults and returns the error."""
        try:
            return cls.load(path), None
        except InvalidKeywordFile as e:
            logger.warning("Ignoring keyword file: %s", e)
            return cls(), e

    def add(self, keyword):
        keyword = (keyword or '').strip()
        if not keyword or keyword in self.keywords:
            return False
        self.keywords = self.keywords + [keyword]
        return True

    def remove(self, keyword):
        if keyword not in self.keywords:
            return False
        self.keywords = [k for k in self.keywords if k != keyword]
        return True

    def save(self, path):
        os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
        with open(path, 'w', encoding='utf-8') as f:
            json.dump(self.keywords, f, ensure_ascii=False)


def filter_keywords(managed, achievements):
    """Managed keywords plus every keyword already used on an achievement."""
    used = {k for a in achievements for k in (a.get('skills') or [])}
    return sorted(set(managed) | used)
