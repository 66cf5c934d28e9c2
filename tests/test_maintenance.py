"""
Tests for the maintenance command line.
"""
import argparse
import json

import httpx
import pytest

from moonfilm.database import SessionLocal
from moonfilm.maintenance import cli, sql
from moonfilm.models import ServiceModel
from moonfilm.platform import ManagementClient, PlatformError, RestClient


def _management(responder):
    sent = []

    def handler(request):
        sent.append(json.loads(request.content)["query"])
        return responder(request)

    return ManagementClient("proj-ref", "sbp_token", transport=httpx.MockTransport(handler)), sent


class TestSql:
    def test_update_schema_columns(self):
        for column in ("amountPaid", "advancePayment", "themePreference", "darkMode"):
            assert f'"{column}"' in sql.UPDATE_SCHEMA

    def test_policies_cover_all_tables(self):
        script = sql.apply_policies()
        for name in ("Admin Manage Services", "Admin Manage Receipts", "Admin Manage Settings"):
            assert f'"{name}"' in script
        assert script.count("IF NOT EXISTS") == 3

    def test_columns_query(self):
        assert "table_name = 'receipts'" in sql.columns("receipts")

    def test_rejects_bad_table_name(self):
        with pytest.raises(ValueError):
            sql.schema("services; drop table receipts")


class TestCommands:
    def test_update_schema(self):
        client, sent = _management(lambda r: httpx.Response(201, json=[]))
        assert cli.cmd_update_schema(argparse.Namespace(), client=client) == 0
        assert sent == [sql.UPDATE_SCHEMA]

    def test_reload_cache(self):
        client, sent = _management(lambda r: httpx.Response(201, json=[]))
        assert cli.cmd_reload_cache(argparse.Namespace(), client=client) == 0
        assert sent == ["NOTIFY pgrst, 'reload schema';"]

    def test_get_schema_prints_columns(self, capsys):
        rows = [
            {"column_name": "id", "data_type": "text", "column_default": None, "is_nullable": "NO"},
            {"column_name": "isActive", "data_type": "boolean", "column_default": "true", "is_nullable": "YES"},
        ]
        client, _ = _management(lambda r: httpx.Response(201, json=rows))
        assert cli.cmd_get_schema(argparse.Namespace(table="services"), client=client) == 0
        out = capsys.readouterr().out
        assert "services table schema:" in out
        assert "- isActive: boolean (Default: true, Nullable: YES)" in out

    def test_check_columns_prints_json(self, capsys):
        rows = [{"column_name": "amountPaid", "data_type": "numeric"}]
        client, _ = _management(lambda r: httpx.Response(201, json=rows))
        cli.cmd_check_columns(argparse.Namespace(table="receipts"), client=client)
        assert json.loads(capsys.readouterr().out) == rows

    def test_failure_raises(self):
        client, _ = _management(lambda r: httpx.Response(403, json={"message": "Forbidden resource"}))
        with pytest.raises(PlatformError) as exc:
            cli.cmd_apply_policies(argparse.Namespace(), client=client)
        assert exc.value.status_code == 403

    def test_sample_rows(self):
        full = cli.sample_row("receipt")
        minimal = cli.sample_row("receipt", minimal=True)
        assert full["receiptNumber"] == "TEST001"
        assert full["amountPaid"] == 0
        assert minimal["receiptNumber"] == "TEST002"
        assert "amountPaid" not in minimal and "advancePayment" not in minimal
        assert cli.sample_row("service")["id"].startswith("test-")

    def test_test_insert(self):
        seen = {}

        def handler(request):
            seen["path"] = request.url.path
            seen["row"] = json.loads(request.content)[0]
            return httpx.Response(201)

        client = RestClient("https://test-project.supabase.co", "anon", transport=httpx.MockTransport(handler))
        args = argparse.Namespace(kind="receipt", minimal=True)
        assert cli.cmd_test_insert(args, client=client) == 0
        assert seen["path"] == "/rest/v1/receipts"
        assert seen["row"]["receiptNumber"] == "TEST002"


class TestMain:
    def test_missing_management_env(self, monkeypatch):
        monkeypatch.delenv("SUPABASE_PROJECT_REF", raising=False)
        monkeypatch.delenv("SUPABASE_ACCESS_TOKEN", raising=False)
        assert cli.main(["update-schema"]) == 1

    def test_bad_table_name(self, monkeypatch):
        monkeypatch.setenv("SUPABASE_PROJECT_REF", "proj-ref")
        monkeypatch.setenv("SUPABASE_ACCESS_TOKEN", "sbp_token")
        assert cli.main(["get-schema", "bad;name"]) == 1

    def test_unknown_command(self):
        with pytest.raises(SystemExit):
            cli.main(["drop-everything"])

    def test_seed_services(self):
        assert cli.main(["seed-services"]) == 0
        db = SessionLocal()
        try:
            assert db.query(ServiceModel).count() == 20
        finally:
            db.close()
        assert cli.main(["seed-services"]) == 0
        db = SessionLocal()
        try:
            assert db.query(ServiceModel).count() == 20
        finally:
            db.close()
