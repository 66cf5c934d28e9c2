"""
moonfilm-maint — one-off schema changes and diagnostics for the hosted project.

    moonfilm-maint update-schema
    moonfilm-maint apply-policies
    moonfilm-maint reload-cache
    moonfilm-maint check-columns [table]
    moonfilm-maint get-schema [table]
    moonfilm-maint test-insert {receipt,service} [--minimal]
    moonfilm-maint seed-services
"""
from __future__ import annotations

import argparse
import json
import logging
import sys
import time
from typing import Optional

from pydantic import ValidationError

from moonfilm.maintenance import sql
from moonfilm.maintenance.settings import ManagementSettings, RestSettings
from moonfilm.platform import ManagementClient, PlatformError, RestClient

logger = logging.getLogger("moonfilm.maintenance")


class MissingConfig(Exception):
    pass


# ---------------------------------------------------------------------------
# Clients
# ---------------------------------------------------------------------------

def management_client() -> ManagementClient:
    try:
        cfg = ManagementSettings()
    except ValidationError:
        raise MissingConfig("SUPABASE_PROJECT_REF, SUPABASE_ACCESS_TOKEN")
    return ManagementClient(cfg.SUPABASE_PROJECT_REF, cfg.SUPABASE_ACCESS_TOKEN, cfg.SUPABASE_API_URL)


def rest_client() -> RestClient:
    try:
        cfg = RestSettings()
    except ValidationError:
        raise MissingConfig("SUPABASE_URL, SUPABASE_ANON_KEY")
    return RestClient(cfg.SUPABASE_URL, cfg.SUPABASE_ANON_KEY)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def _run(client: ManagementClient, query: str, label: str):
    logger.info("%s...", label)
    try:
        return client.run_sql(query)
    finally:
        client.close()


def cmd_update_schema(args, client: Optional[ManagementClient] = None) -> int:
    result = _run(client or management_client(), sql.UPDATE_SCHEMA, "Executing SQL update")
    logger.info("SQL update succeeded: %s", result)
    return 0


def cmd_apply_policies(args, client: Optional[ManagementClient] = None) -> int:
    result = _run(client or management_client(), sql.apply_policies(), "Applying RLS policies")
    logger.info("Policies applied: %s", result)
    return 0


def cmd_reload_cache(args, client: Optional[ManagementClient] = None) -> int:
    result = _run(client or management_client(), sql.RELOAD_SCHEMA_CACHE, "Reloading schema cache")
    logger.info("Schema cache reloaded: %s", result)
    return 0


def cmd_check_columns(args, client: Optional[ManagementClient] = None) -> int:
    query = sql.columns(args.table)
    result = _run(client or management_client(), query, f"Checking {args.table} columns")
    print(json.dumps(result, indent=2))
    return 0


def cmd_get_schema(args, client: Optional[ManagementClient] = None) -> int:
    query = sql.schema(args.table)
    result = _run(client or management_client(), query, f"Reading {args.table} schema")
    print(f"{args.table} table schema:")
    for row in result:
        print(
            f"- {row['column_name']}: {row['data_type']} "
            f"(Default: {row['column_default']}, Nullable: {row['is_nullable']})"
        )
    return 0


def sample_row(kind: str, minimal: bool = False) -> dict:
    """Diagnostic row in the hosted table's column naming."""
    stamp = str(int(time.time() * 1000))
    if kind == "service":
        return {
            "id": f"test-{stamp}",
            "name": "Test Service",
            "category": "photography",
            "price": 100,
            "description": "Test description",
            "isActive": True,
        }
    row = {
        "id": stamp,
        "receiptNumber": "TEST002" if minimal else "TEST001",
        "customerName": "Walk-in Customer",
        "customerPhone": "",
        "customerEmail": "",
        "eventType": "Wedding",
        "eventDate": "2024-01-01",
        "items": [],
        "subtotal": 100,
        "discount": 0,
        "discountType": "fixed",
        "tax": 0,
        "total": 100,
        "notes": "Test note without extra cols" if minimal else "Test note",
        "status": "pending",
        "balanceDue": 100,
    }
    if not minimal:
        row.update(amountPaid=0, advancePayment=0)
    return row


def cmd_test_insert(args, client: Optional[RestClient] = None) -> int:
    client = client or rest_client()
    table = "services" if args.kind == "service" else "receipts"
    logger.info("Attempting to insert %s as anonymous user...", args.kind)
    try:
        data = client.insert(table, [sample_row(args.kind, args.minimal)], returning=args.kind == "service")
    finally:
        client.close()
    logger.info("Insert successful")
    if data:
        print(json.dumps(data, indent=2))
    return 0


def cmd_seed_services(args) -> int:
    from moonfilm.data.defaults import DEFAULT_SERVICES

    try:
        from moonfilm.database import Base, SessionLocal, engine
    except ValidationError:
        raise MissingConfig("SUPABASE_URL, SUPABASE_ANON_KEY")
    from moonfilm.models import ServiceModel

    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if db.query(ServiceModel).count():
            logger.info("Services table is not empty, nothing to seed")
            return 0
        for service in DEFAULT_SERVICES:
            db.add(
                ServiceModel(
                    id=service.id,
                    name=service.name,
                    category=service.category,
                    price=service.price,
                    description=service.description,
                    is_active=service.is_active,
                )
            )
        db.commit()
        logger.info("Seeded %d services", len(DEFAULT_SERVICES))
    finally:
        db.close()
    return 0


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="moonfilm-maint", description="Hosted project maintenance")
    sub = parser.add_subparsers(dest="command", required=True)

    sub.add_parser("update-schema", help="add payment and theme columns").set_defaults(func=cmd_update_schema)
    sub.add_parser("apply-policies", help="create admin RLS policies").set_defaults(func=cmd_apply_policies)
    sub.add_parser("reload-cache", help="reload the REST schema cache").set_defaults(func=cmd_reload_cache)

    p = sub.add_parser("check-columns", help="list a table's columns")
    p.add_argument("table", nargs="?", default="receipts")
    p.set_defaults(func=cmd_check_columns)

    p = sub.add_parser("get-schema", help="describe a table's columns")
    p.add_argument("table", nargs="?", default="services")
    p.set_defaults(func=cmd_get_schema)

    p = sub.add_parser("test-insert", help="insert a diagnostic row with the anonymous key")
    p.add_argument("kind", choices=["receipt", "service"])
    p.add_argument("--minimal", action="store_true", help="omit the payment columns")
    p.set_defaults(func=cmd_test_insert)

    sub.add_parser("seed-services", help="load the default catalog into an empty database").set_defaults(
        func=cmd_seed_services
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s  %(name)-30s  %(levelname)-5s  %(message)s",
    )
    args = build_parser().parse_args(argv)
    try:
        return args.func(args)
    except MissingConfig as e:
        logger.error("Missing required environment variables: %s", e)
        return 1
    except PlatformError as e:
        logger.error("Failed: %s %s", e.status_code, e.message)
        return 1
    except ValueError as e:
        logger.error("%s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
