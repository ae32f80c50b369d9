CJK_RANGES = (
    (0x1100, 0x11FF),  # Hangul Jamo
    (0x20A9, 0x20A9),  # Won Sign
    (0x2329, 0x232A),  # Left/Right-Pointing Angle Bracket
    (0x2630, 0x2637),  # Trigrams for Divination
    (0x268A, 0x268F),  # Digrams/Monograms
    (0x2E80, 0x2E99),  # CJK Radicals Supplement
    (0x2E9B, 0x2EF3),  # CJK Radicals Supplement, after unassigned U+2E9A
    (0x2F00, 0x2FD5),  # Kangxi Radicals
    (0x2FF0, 0x303E),  # Ideographic Description Characters + CJK Symbols and Punctuation
    (0x3041, 0x3096),  # Hiragana
    (0x3099, 0x30FF),  # Combining Marks + Katakana
    (0x3105, 0x312F),  # Bopomofo
    (0x3131, 0x318E),  # Hangul Compatibility Jamo
    (0x3190, 0x31E5),  # Kanbun + CJK Strokes + Katakana Phonetic Extensions + Enclosed CJK Letters
    (0x31EF, 0x321E),  # Enclosed CJK Letters and Months
    (0x3220, 0x3247),  # Enclosed CJK Letters and Months
    (0x3250, 0xA48C),  # CJK Compatibility + Ext A + Unified Ideographs + Yi Syllables
    (0xA490, 0xA4C6),  # Yi Radicals
    (0xA960, 0xA97C),  # Hangul Jamo Extended-A
    (0xAC00, 0xD7A3),  # Hangul Syllables
    (0xD7B0, 0xD7C6),  # Hangul Jamo Extended-B
    (0xD7CB, 0xD7FB),  # Hangul Jamo Extended-B
    (0xF900, 0xFAFF),  # CJK Compatibility Ideographs
    (0xFE10, 0xFE19),  # Vertical Forms
    (0xFE30, 0xFE52),  # CJK Compatibility Forms
    (0xFE54, 0xFE66),  # CJK Compatibility Forms
    (0xFE68, 0xFE6B),  # CJK Compatibility Forms
    (0xFF01, 0xFFBE),  # Halfwidth and Fullwidth Forms
    (0xFFC2, 0xFFC7),  # Halfwidth and Fullwidth Forms
    (0xFFCA, 0xFFCF),  # Halfwidth and Fullwidth Forms
    (0xFFD2, 0xFFD7),  # Halfwidth and Fullwidth Forms
    (0xFFDA, 0xFFDC),  # Halfwidth and Fullwidth Forms
    (0xFFE0, 0xFFE6),  # Halfwidth and Fullwidth Forms
    (0xFFE8, 0xFFEE),  # Halfwidth and Fullwidth Forms
    (0x16FE0, 0x16FE4),  # Ideographic Symbols and Punctuation
    (0x16FF0, 0x16FF6),  # Vietnamese Extensions
    (0x17000, 0x18CD5),  # Tangut + Tangut Components
    (0x18CFF, 0x18D1E),  # Tangut Supplement
    (0x18D80, 0x18DF2),  # Tangut Supplement
    (0x1AFF0, 0x1AFF3),  # Kana Extended-B
    (0x1AFF5, 0x1AFFB),  # Kana Extended-B
    (0x1AFFD, 0x1AFFE),  # Kana Extended-B
    (0x1B000, 0x1B122),  # Kana Supplement + Kana Extended-A
    (0x1B132, 0x1B132),  # Kana Extended-A
    (0x1B150, 0x1B152),  # Small Kana Extension
    (0x1B155, 0x1B155),  # Small Kana Extension
    (0x1B164, 0x1B167),  # Small Kana Extension
    (0x1B170, 0x1B2FB),  # Nushu
    (0x1D300, 0x1D356),  # Tai Xuan Jing Symbols
    (0x1D360, 0x1D376),  # Counting Rod Numerals
    (0x1F200, 0x1F200),  # Enclosed Ideographic Supplement
    (0x1F202, 0x1F202),  # Enclosed Ideographic Supplement
    (0x1F210, 0x1F219),  # Enclosed Ideographic Supplement
    (0x1F21B, 0x1F22E),  # Enclosed Ideographic Supplement
    (0x1F230, 0x1F231),  # Enclosed Ideographic Supplement
    (0x1F237, 0x1F237),  # Enclosed Ideographic Supplement
    (0x1F23B, 0x1F23B),  # Enclosed Ideographic Supplement
    (0x1F240, 0x1F248),  # Enclosed Ideographic Supplement
    (0x1F260, 0x1F265),  # Enclosed Ideographic Supplement
    (0x20000, 0x3FFFD),  # CJK Unified Ideographs Extensions B-I + Compatibility Supplement
)


def is_cjk(ch: str | int) -> bool:
    """Whether a character (or its integer code point) is in a CJK range.

    Any integer is accepted; values outside the table, including negative
    ones and ones above U+10FFFF, are not CJK.
    """
    cp = ch if isinstance(ch, int) else ord(ch)
    for lo, hi in CJK_RANGES:
        if lo <= cp <= hi:
            return True
    return False


def contains_cjk(text: str) -> bool:
    return any(is_cjk(ch) for ch in text)


def cjk_chars(text: str) -> list[str]:
    return [ch for ch in text if is_cjk(ch)]


def cjk_char_fraction(text: str, alpha_only: bool = True) -> float:
    counted = [ch for ch in text if ch.isalpha()] if alpha_only else list(text)
    if len(counted) == 0:
        return 0.0
    return len([ch for ch in counted if is_cjk(ch)]) / len(counted)
