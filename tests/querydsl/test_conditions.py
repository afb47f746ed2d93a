"""Tests for the condition set accumulator and WHERE assembly."""

import pytest

from lookupsql.exceptions import EmptyValueError
from lookupsql.querydsl import ConditionSet


@pytest.fixture
def conditions(mysql):
    return ConditionSet(mysql)


class TestFilterExclude:
    def test_empty(self, conditions):
        assert conditions.to_sql() == ("", [])

    def test_single_filter(self, conditions):
        conditions.filter({"age__gte": 18})
        assert conditions.to_sql() == (" WHERE (`age`>=?)", [18])

    def test_single_exclude(self, conditions):
        conditions.exclude({"deleted__exact": True})
        assert conditions.to_sql() == (" WHERE NOT (`deleted`=?)", [True])

    def test_batches_are_and_joined(self, conditions):
        conditions.filter(a=1).filter(b__Q=2, c=3).exclude(d=4).exclude(e__in=[5, 6])
        sql, args = conditions.to_sql()
        assert sql == " WHERE (`a`=?) AND (`b`=? AND `c`=?) AND NOT (`d`=?) AND NOT (`e` IN (?,?))"
        assert args == [1, 2, 3, 4, 5, 6]

    def test_includes_before_excludes(self, conditions):
        conditions.exclude(c=3).filter(a=1)
        assert conditions.to_sql() == (" WHERE (`a`=?) AND NOT (`c`=?)", [1, 3])

    def test_empty_batches_ignored(self, conditions):
        conditions.filter().filter({}).exclude([])
        assert len(conditions) == 0
        assert conditions.to_sql() == ("", [])

    def test_failed_batch_leaves_state(self, conditions):
        conditions.filter(a=1)
        with pytest.raises(EmptyValueError):
            conditions.filter(b__in=[])
        assert conditions.to_sql() == (" WHERE (`a`=?)", [1])

    def test_includes_excludes_views(self, conditions):
        conditions.filter(a=1).exclude(b=2)
        assert [e.sql for e in conditions.includes] == ["`a`=?"]
        assert [e.sql for e in conditions.excludes] == ["`b`=?"]


class TestRawWhere:
    def test_override_wins_over_later_filter(self, conditions):
        conditions.where("custom = ?", 5).filter(age__gte=18)
        assert conditions.to_sql() == (" WHERE custom = ?", [5])

    def test_override_wins_over_earlier_filter(self, conditions):
        conditions.filter(age__gte=18).exclude(x=1).where("a = ? OR b = ?", 1, 2)
        assert conditions.to_sql() == (" WHERE a = ? OR b = ?", [1, 2])

    def test_empty_override_clears(self, conditions):
        conditions.filter(a=1).where("custom = 1").where("")
        assert conditions.to_sql() == (" WHERE (`a`=?)", [1])

    def test_reset(self, conditions):
        conditions.filter(a=1).where("x = 1").reset()
        assert conditions.to_sql() == ("", [])

    def test_to_sql_returns_fresh_args(self, conditions):
        conditions.filter(a=1)
        _, args = conditions.to_sql()
        args.append("mutated")
        assert conditions.to_sql()[1] == [1]
