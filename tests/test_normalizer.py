import pytest

from jsubfreq.normalizer import normalize, normalize_all


@pytest.mark.parametrize("token", ["の", "は", "を", "っ", "ッ", "ｯ", "・"])
def test_standalone_single_chars_discarded(token):
    assert normalize(token) is None


@pytest.mark.parametrize("token", ["abc123", "！？", "１２３", "…", "♪♪", " ", ""])
def test_all_noise_discarded(token):
    assert normalize(token) is None


def test_valid_tokens_unchanged():
    for tok in ["猫", "可愛い", "スター・ウォーズ", "やっぱり", "ｱｲｽ", "人々", "時々", "〆切"]:
        assert normalize(tok) == tok


def test_noise_stripped_everywhere():
    assert normalize("「猫」") == "猫"
    assert normalize("可愛い!!") == "可愛い"
    assert normalize("え〜っと…") == "えっと"
    assert normalize("a猫b猫a") == "猫猫"


def test_only_raw_length_decides_standalone_rule():
    # 除去後に1文字のひらがなになっても破棄しない
    assert normalize("の!") == "の"


def test_idempotent():
    for tok in ["「猫」", "可愛い!!", "スター・ウォーズ", "え〜っと…", "ｱｲｽ!"]:
        once = normalize(tok)
        assert once is not None
        assert normalize(once) == once


def test_normalize_all_skips_discards():
    assert list(normalize_all(["の", "猫", "abc", "「犬」"])) == ["猫", "犬"]


def test_iteration_mark_not_merged_into_base_word():
    assert list(normalize_all(["人", "人々", "「時々」"])) == ["人", "人々", "時々"]
