from sqlalchemy import create_engine, inspect

from infra.migrate import run_migrations


def test_migrations_create_dashboard_schema(tmp_path):
    db_url = f"sqlite:///{tmp_path / 'siteledger.db'}"

    run_migrations(db_url)

    engine = create_engine(db_url, future=True)
    inspector = inspect(engine)
    tables = set(inspector.get_table_names())
    assert {"projects", "tasks", "transactions", "transaction_categories"} <= tables
    tx_columns = {c["name"] for c in inspector.get_columns("transactions")}
    assert {"id", "project_id", "date", "amount", "type", "category", "description"} <= tx_columns
    task_columns = {c["name"] for c in inspector.get_columns("tasks")}
    assert "tags" in task_columns
    engine.dispose()


def test_migrations_are_repeatable(tmp_path):
    db_url = f"sqlite:///{tmp_path / 'again.db'}"

    run_migrations(db_url)
    run_migrations(db_url)

    engine = create_engine(db_url, future=True)
    assert "alembic_version" in inspect(engine).get_table_names()
    engine.dispose()
