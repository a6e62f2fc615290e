import pytest

from hebtext.hebrew import (
    GematriaValue,
    compute_gematria,
    extract_unique_words,
    is_hebrew_word,
    is_rtl,
    letters_only,
    strip_marks,
)

SHEVA = chr(0x05B0)
DAGESH = chr(0x05BC)
ETNAHTA = chr(0x0591)
MAQAF = chr(0x05BE)
PASEQ = chr(0x05C0)
SOF_PASUQ = chr(0x05C3)

BERESHIT = "בְּרֵאשִׁית"


class TestComputeGematria:
    def test_empty(self):
        assert compute_gematria("") == GematriaValue(0, 0, 0)

    def test_single_letters(self):
        assert compute_gematria("א") == GematriaValue(1, 1, 1)
        # ordinal counts the position, not the value
        assert compute_gematria("ב") == GematriaValue(2, 2, 1)

    def test_two_letters(self):
        assert compute_gematria("אב") == GematriaValue(simple=3, standard=3, ordinal=3)

    def test_final_forms_match_base_letters(self):
        assert compute_gematria("ך") == compute_gematria("כ") == GematriaValue(20, 20, 1)
        for final, base in zip("ךםןףץ", "כמנפצ"):
            assert compute_gematria(final) == compute_gematria(base)

    def test_marks_only(self):
        assert compute_gematria(SHEVA) == GematriaValue(0, 0, 0)
        assert compute_gematria(SHEVA + DAGESH + ETNAHTA) == GematriaValue(0, 0, 0)

    def test_pointed_word_equals_unpointed(self):
        assert compute_gematria(BERESHIT) == compute_gematria("בראשית")
        assert compute_gematria("בראשית") == GematriaValue(913, 913, 21)

    def test_non_hebrew_ignored_and_not_counted_in_ordinal(self):
        assert compute_gematria("hello 123") == GematriaValue(0, 0, 0)
        assert compute_gematria("א b ב" + SOF_PASUQ) == GematriaValue(3, 3, 3)

    def test_ordinal_spans_words(self):
        # שלום = 300+30+6+40, positions 1..4
        assert compute_gematria("שלום") == GematriaValue(376, 376, 10)
        assert compute_gematria("שלום שלום").ordinal == sum(range(1, 9))

    def test_simple_equals_standard(self):
        for text in ["", "אבג", BERESHIT, "תורה ומצוות", "abc"]:
            g = compute_gematria(text)
            assert g.simple == g.standard

    def test_none_is_tolerated(self):
        assert compute_gematria(None) == GematriaValue(0, 0, 0)


class TestExtractUniqueWords:
    def test_empty(self):
        assert extract_unique_words("") == []
        assert extract_unique_words("   \n\t ") == []

    def test_dedup_first_occurrence_order(self):
        assert extract_unique_words("שלום שלום עולם") == ["שלום", "עולם"]

    def test_no_hebrew(self):
        assert extract_unique_words("hello world") == []

    def test_sof_pasuq_stripped_points_kept(self):
        words = extract_unique_words(BERESHIT + SOF_PASUQ)
        assert words == [BERESHIT]
        assert SHEVA in words[0]

    def test_paseq_stripped(self):
        assert extract_unique_words("אבא" + PASEQ + " " + PASEQ) == ["אבא"]

    def test_marks_only_chunk_dropped(self):
        assert extract_unique_words(SHEVA + " " + SOF_PASUQ + " שלום") == ["שלום"]

    def test_different_pointing_is_different_token(self):
        pointed = "ש" + chr(0x05B8) + "לום"
        assert extract_unique_words(pointed + " שלום") == [pointed, "שלום"]

    def test_maqaf_joins_token(self):
        token = "על" + MAQAF + "פני"
        assert extract_unique_words(token) == [token]

    def test_mixed_tokens_keep_latin(self):
        assert extract_unique_words("abc שלום2 x") == ["שלום2"]

    def test_idempotent(self):
        elohim = "אֱלֹהִים"
        text = f"{BERESHIT} בָּרָא {elohim} אֵת הַשָּׁמַיִם וְאֵת הָאָרֶץ{SOF_PASUQ} {elohim}"
        first = extract_unique_words(text)
        second = extract_unique_words(text)
        assert set(first) == set(second)
        assert len(first) == len(set(first)) == 7
        assert extract_unique_words(" ".join(first)) == first


class TestHelpers:
    @pytest.mark.parametrize("text,expected", [
        ("שלום", True),
        ("shalom", False),
        ("", False),
        ("سلام", True),
        ("abc ש", True),
    ])
    def test_is_rtl(self, text, expected):
        assert is_rtl(text) is expected

    def test_strip_marks(self):
        assert strip_marks(BERESHIT) == "בראשית"
        assert strip_marks("על" + MAQAF + "פני" + SOF_PASUQ) == "על" + MAQAF + "פני" + SOF_PASUQ
        assert strip_marks("") == ""

    def test_letters_only(self):
        assert letters_only(BERESHIT + SOF_PASUQ + " abc") == "בראשית"

    def test_is_hebrew_word(self):
        assert is_hebrew_word(BERESHIT)
        assert not is_hebrew_word(SHEVA + DAGESH)
        assert not is_hebrew_word("123")

    @pytest.mark.parametrize("code,is_mark", [
        (0x0591, True),   # etnahta, first te'amim mark
        (0x05BD, True),   # meteg
        (0x05BE, False),  # maqaf
        (0x05BF, True),   # rafe
        (0x05C0, False),  # paseq
        (0x05C2, True),   # sin dot
        (0x05C3, False),  # sof pasuq
        (0x05C4, True),   # upper dot
        (0x05C5, True),   # lower dot
        (0x05C6, False),  # nun hafukha
        (0x05C7, True),   # qamats qatan
    ])
    def test_mark_range_edges(self, code, is_mark):
        ch = chr(code)
        assert strip_marks("א" + ch) == ("א" if is_mark else "א" + ch)
        assert not is_hebrew_word(ch)
        assert compute_gematria("א" + ch + "ב") == GematriaValue(3, 3, 3)
