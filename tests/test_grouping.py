import pandas as pd

from features.grouping import group_by_store


def test_groups_keep_date_order(sample_records):
    groups = group_by_store(sample_records)
    assert list(groups) == ["Magic Box", "Tee-Pop"]
    magic = groups["Magic Box"]
    assert magic["date_key"].tolist() == ["2025-07-25", "2025-07-26", "2025-07-27"]
    assert (magic["store"] == "Magic Box").all()
    assert sum(len(g) for g in groups.values()) == len(sample_records)


def test_grouping_is_repeatable_and_pure(sample_records):
    before = sample_records.copy()
    first = group_by_store(sample_records)
    second = group_by_store(sample_records)
    assert list(first) == list(second)
    for store in first:
        pd.testing.assert_frame_equal(first[store], second[store])
    pd.testing.assert_frame_equal(sample_records, before)


def test_empty_records_give_no_groups(sample_records):
    assert group_by_store(sample_records.iloc[0:0]) == {}
