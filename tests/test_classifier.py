from jsubfreq.classifier import (
    classify,
    is_noise,
    is_standalone_invalid,
    is_valid,
    NOISE,
    STANDALONE,
    STANDALONE_RANGES,
    VALID,
    VALID_RANGES,
)


def test_japanese_scripts_are_valid():
    for ch in "あのカタナ猫漢㐀ｱｲﾝ々〆〇":
        assert classify(ch) == VALID, ch


def test_everything_else_is_noise():
    for ch in "aZ0９！？、。「」…♪→ 　\t\ud800":
        assert classify(ch) == NOISE, repr(ch)
        assert is_noise(ch)


def test_standalone_only_when_alone():
    for ch in "のはをっッｯ・":
        assert classify(ch, standalone=True) == STANDALONE, ch
        assert classify(ch) == VALID, ch
        assert is_standalone_invalid(ch)


def test_kanji_and_katakana_words_are_not_standalone_invalid():
    for ch in "猫カアー":
        assert not is_standalone_invalid(ch)
        assert classify(ch, standalone=True) == VALID


def test_valid_ranges_sorted_and_disjoint():
    bounds = [(r.start, r.end) for r in VALID_RANGES]
    assert bounds == sorted(bounds)
    for (s1, e1), (s2, e2) in zip(bounds, bounds[1:]):
        assert s1 <= e1 < s2 <= e2


def test_standalone_ranges_are_subset_of_valid():
    for r in STANDALONE_RANGES:
        assert is_valid(chr(r.start)) and is_valid(chr(r.end))


def test_range_membership_rejects_non_chars():
    r = VALID_RANGES[0]
    assert "あ" in r
    assert "ああ" not in r
    assert 0x3042 not in r
