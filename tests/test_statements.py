"""Tests for statement composition helpers."""

from unittest.mock import patch

import pytest

from lookupsql import QuerySet
from lookupsql.exceptions import EmptyValueError, InvalidFieldError
from lookupsql.settings import settings
from lookupsql.statements import (
    count_statement,
    delete_statement,
    insert_statement,
    select_statement,
    update_statement,
)


class TestSelect:
    def test_full_select(self, qs):
        qs.filter(age__gte=18).exclude(deleted=True).group_by("status").order_by("-created_at").limit(10, 2)
        sql, args = select_statement("users", qs)
        assert sql == (
            "SELECT * FROM `users` WHERE (`age`>=?) AND NOT (`deleted`=?)"
            " GROUP BY `status` ORDER BY `created_at` DESC LIMIT 10 OFFSET 10"
        )
        assert args == [18, True]

    def test_fallback_columns(self, qs):
        sql, _ = select_statement("users", qs, columns=["id", "name"])
        assert sql == "SELECT `id`,`name` FROM `users`"

    def test_select_list_wins_over_fallback(self, qs):
        sql, _ = select_statement("users", qs.select("age"), columns=["id", "name"])
        assert sql == "SELECT `age` FROM `users`"

    def test_one(self, qs):
        qs.filter(id=3).limit(10, 4)
        assert select_statement("users", qs, one=True) == ("SELECT * FROM `users` WHERE (`id`=?) LIMIT 1", [3])


class TestCountDelete:
    def test_count(self, qs):
        assert count_statement("users", qs.filter(a=1)) == ("SELECT count(1) FROM `users` WHERE (`a`=?)", [1])

    def test_count_without_where(self, qs):
        assert count_statement("users", qs) == ("SELECT count(1) FROM `users`", [])

    def test_delete(self, qs):
        qs.where("`id` = ?", 9)
        assert delete_statement("users", qs) == ("DELETE FROM `users` WHERE `id` = ?", [9])


class TestInsertUpdate:
    def test_insert(self):
        sql, args = insert_statement("users", {"name": "x", "age": 3}, dialect="mysql")
        assert sql == "INSERT INTO `users` (`name`,`age`) VALUES (?,?)"
        assert args == ["x", 3]

    def test_insert_sqlite(self, sqlite):
        sql, _ = insert_statement("users", {"name": "x"}, dialect=sqlite)
        assert sql == 'INSERT INTO "users" ("name") VALUES (?)'

    def test_insert_empty(self):
        with pytest.raises(EmptyValueError):
            insert_statement("users", {})

    def test_insert_keeps_known_fields(self):
        data = {"name": "x", "role": "admin", "age": 3}
        sql, args = insert_statement("users", data, dialect="mysql", fields={"name", "age"})
        assert sql == "INSERT INTO `users` (`name`,`age`) VALUES (?,?)"
        assert args == ["x", 3]

    def test_insert_nothing_known(self):
        with pytest.raises(EmptyValueError):
            insert_statement("users", {"role": "admin"}, dialect="mysql", fields={"name"})

    def test_insert_strict_from_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "STRICT_FIELDS", True)
        with pytest.raises(InvalidFieldError) as exc:
            insert_statement("users", {"role": "admin"}, fields={"name"})
        assert exc.value.details == {"field": "role", "clause": "INSERT"}

    def test_update_args_order(self, qs):
        qs.filter(id__in=[1, 2]).exclude(locked=True)
        sql, args = update_statement("users", qs, {"name": "y", "age": 4})
        assert sql == "UPDATE `users` SET `name`=?,`age`=? WHERE (`id` IN (?,?)) AND NOT (`locked`=?)"
        assert args == ["y", 4, 1, 2, True]

    def test_update_drops_unknown_keys(self):
        qs = QuerySet("mysql", fields={"id", "name"}, strict=False).filter(id=1)
        with patch.object(qs.logger, "unknown_column") as mock_unknown:
            sql, args = update_statement("users", qs, {"name": "y", "role": "admin"})
        assert sql == "UPDATE `users` SET `name`=? WHERE (`id`=?)"
        assert args == ["y", 1]
        mock_unknown.assert_called_once_with("UPDATE", "role")

    def test_update_unknown_key_strict(self):
        qs = QuerySet("mysql", fields={"id"}, strict=True)
        with pytest.raises(InvalidFieldError):
            update_statement("users", qs, {"role": "admin"})

    def test_update_empty(self, qs):
        with pytest.raises(EmptyValueError):
            update_statement("users", qs, {})

    def test_sqlite_table_quoting(self):
        qs = QuerySet("sqlite")
        assert delete_statement("my table", qs) == ('DELETE FROM "my table"', [])
