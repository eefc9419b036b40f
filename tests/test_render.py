import pytest

from jsubfreq.frequency import FrequencyTable
from jsubfreq.pipeline import build_report
from jsubfreq.render import (
    display_deficit,
    freq_column_width,
    rank,
    render,
    render_table,
    rows,
    token_column_width,
)

SCENARIO = ["の", "猫", "猫", "は", "可愛い"]


def _table(tokens):
    t = FrequencyTable()
    t.update(tokens)
    return t


def test_scenario_table_mode():
    out = build_report(SCENARIO, mode="table")
    assert out == (
        "|------|-----|\n"
        "|Token |Freq |\n"
        "|------|-----|\n"
        "|猫    |2    |\n"
        "|可愛い|1    |\n"
    )


def test_scenario_word_list_mode():
    assert build_report(SCENARIO, mode="words") == "猫\n可愛い\n"


def test_word_list_keeps_encounter_order():
    t = _table(["犬", "猫", "猫", "猫"])
    assert render(t, "words") == "犬\n猫\n"


def test_empty_table():
    assert render(FrequencyTable(), "table") == "||-----|\n|Token|Freq |\n||-----|\n"
    assert render(FrequencyTable(), "words") == ""


def test_ties_are_lexicographic():
    t = _table(["猫", "犬", "鳥", "鳥"])
    assert rank(t) == [("鳥", 2), ("犬", 1), ("猫", 1)]


def test_render_is_deterministic():
    t = _table(["猫", "犬", "鳥", "ｱｲｽ", "スター・ウォーズ", "犬"])
    assert render(t) == render(t)
    # 挿入順が違っても同じ内容なら同じ出力
    u = _table(["犬", "犬", "スター・ウォーズ", "ｱｲｽ", "鳥", "猫"])
    assert render(t) == render(u)


def test_display_deficit():
    assert display_deficit("猫") == 1
    assert display_deficit("可愛い") == 3
    assert display_deficit("ｱｲｽ") == 0
    assert display_deficit("ｱ猫") == 1


def test_deficit_never_exceeds_column_width():
    t = _table(["ｱ", "猫", "スター・ウォーズ", "ｱｲｽ猫"])
    tw = token_column_width(t.longest)
    for row in rows(t):
        assert 0 <= row.deficit <= tw


def test_mixed_width_rows_align():
    import unicodedata

    def columns(s):
        return sum(2 if unicodedata.east_asian_width(c) in "WF" else 1 for c in s)

    t = _table(["ｱｲｽ", "猫", "スター・ウォーズ"])
    lines = render_table(t).splitlines()
    widths = {columns(line) for line in lines[3:]}
    assert len(widths) == 1


def test_column_widths():
    assert token_column_width(3) == 6
    assert freq_column_width(2) == 5
    assert freq_column_width(1234) == 8


def test_render_freezes_and_rejects_unknown_mode():
    t = _table(["猫"])
    with pytest.raises(ValueError):
        render(t, "csv")
    render(t)
    assert t.frozen
