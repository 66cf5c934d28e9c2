"""
SQL run against the hosted project by the maintenance commands.
"""

UPDATE_SCHEMA = """
ALTER TABLE public.receipts ADD COLUMN IF NOT EXISTS "amountPaid" numeric default 0;
ALTER TABLE public.receipts ADD COLUMN IF NOT EXISTS "advancePayment" numeric default 0;
ALTER TABLE public.settings ADD COLUMN IF NOT EXISTS "themePreference" text default 'default';
ALTER TABLE public.settings ADD COLUMN IF NOT EXISTS "darkMode" boolean default false;
"""

RELOAD_SCHEMA_CACHE = "NOTIFY pgrst, 'reload schema';"

POLICY_TABLES = ("services", "receipts", "settings")


def admin_policy(table: str) -> str:
    """Full access for signed-in users, created only if the policy is missing."""
    name = f"Admin Manage {table.capitalize()}"
    return f"""
DO $$
BEGIN
    IF NOT EXISTS (SELECT 1 FROM pg_policies WHERE policyname = '{name}') THEN
        CREATE POLICY "{name}" ON public.{table} FOR ALL TO authenticated USING (true) WITH CHECK (true);
    END IF;
END $$;
"""


def apply_policies() -> str:
    return "".join(admin_policy(t) for t in POLICY_TABLES)


def _table_literal(table: str) -> str:
    if not table.replace("_", "").isalnum():
        raise ValueError(f"Invalid table name: {table!r}")
    return f"'{table}'"


def columns(table: str) -> str:
    return (
        "SELECT column_name, data_type FROM information_schema.columns "
        f"WHERE table_name = {_table_literal(table)};"
    )


def schema(table: str) -> str:
    return f"""
SELECT column_name, data_type, column_default, is_nullable
FROM information_schema.columns
WHERE table_name = {_table_literal(table)}
ORDER BY ordinal_position;
"""
