"""Text normalization for tolerant answer comparison.

Canonical form = half-width characters, trimmed and collapsed whitespace,
optional lowercase, then whole-word synonym folding.
  "２０３４年２月１９日" → "2034年2月19日"
  "  北京时间  "         → "utc+8"
"""
import math
import re
from types import MappingProxyType

# Full-width digits and Latin letters sit at a fixed offset from ASCII
FULLWIDTH_OFFSET = ord('０') - ord('0')  # 0xFEE0

FULLWIDTH_DIGITS = (0xFF10, 0xFF19)
FULLWIDTH_UPPER = (0xFF21, 0xFF3A)
FULLWIDTH_LOWER = (0xFF41, 0xFF5A)

FULLWIDTH_PUNCTUATION = MappingProxyType({
    '，': ',',
    '。': '.',
    '；': ';',
    '：': ':',
    '！': '!',
    '？': '?',
    '（': '(',
    '）': ')',
    '【': '[',
    '】': ']',
    '“': '"',
    '”': '"',
    '‘': "'",
    '’': "'",
    '、': ',',
    '　': ' ',  # ideographic space
})

ZH_SYNONYMS = MappingProxyType({
    '北京时间': 'utc+8',
    'utc+8': 'utc+8',
    '东八区': 'utc+8',
})

_WHITESPACE_RE = re.compile(r'\s+')
_DATE_RE = re.compile(r'([0-9]{4})[-/年.]([0-9]{1,2})[-/月.]([0-9]{1,2})')
_NUMBER_RE = re.compile(r'^[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?$')


def _half_width_char(char):
    code = ord(char)
    for low, high in (FULLWIDTH_DIGITS, FULLWIDTH_UPPER, FULLWIDTH_LOWER):
        if low <= code <= high:
            return chr(code - FULLWIDTH_OFFSET)
    return FULLWIDTH_PUNCTUATION.get(char, char)


def to_half_width(text):
    """Map full-width digits, letters and punctuation to their ASCII forms.

    Anything outside the table passes through unchanged.
    """
    return ''.join(_half_width_char(c) for c in text)


def normalize_whitespace(text):
    """Trim and collapse every whitespace run to a single space."""
    return _WHITESPACE_RE.sub(' ', text.strip())


def normalize_text(text, lowercase=True, fold_synonyms=True):
    """Full normalization pipeline used for equality checks.

    Synonyms are folded per space-delimited word, so "北京时间" is replaced
    only when it stands alone, never inside a longer word.
    """
    collapsed = normalize_whitespace(to_half_width(text))
    if lowercase:
        collapsed = collapsed.lower()
    if not fold_synonyms:
        return collapsed
    return ' '.join(ZH_SYNONYMS.get(word, word) for word in collapsed.split(' '))


def parse_date_string(text):
    """Extract the first year-month-day triple and return it as YYYY-MM-DD.

    Accepts "2034-02-19", "2034/2/19", "2034.2.19", "2034年2月19日" and their
    full-width variants. No calendar check: "2034-13-32" comes back as is.

    Returns None when nothing date-like is found.
    """
    normalized = normalize_text(text, lowercase=False)
    match = _DATE_RE.search(normalized)
    if not match:
        return None
    year, month, day = (int(part) for part in match.groups())
    return f'{year:04d}-{month:02d}-{day:02d}'


def normalize_number_input(text):
    """Parse typed numeric input ("１,２３４.５" → 1234.5).

    Returns None for empty, non-numeric or non-finite input.
    """
    normalized = normalize_text(text).replace(',', '')
    if not normalized or not _NUMBER_RE.match(normalized):
        return None
    value = float(normalized)
    return value if math.isfinite(value) else None


def equals_text(user_input, expected, case_insensitive=True, normalize_zh=False):
    """Compare two strings by canonical form.

    Synonyms only take part when normalize_zh is set: the *expected* string
    is then swapped through the table as a whole string, and both sides get
    the per-word folding. Without it "北京时间" and "utc+8" stay distinct.
    """
    if normalize_zh:
        expected = ZH_SYNONYMS.get(expected, expected)
    target = normalize_text(expected, lowercase=case_insensitive,
                            fold_synonyms=normalize_zh)
    given = normalize_text(user_input, lowercase=case_insensitive,
                           fold_synonyms=normalize_zh)
    return given == target
