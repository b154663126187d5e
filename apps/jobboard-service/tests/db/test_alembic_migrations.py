from __future__ import annotations

from pathlib import Path

from alembic import command
from alembic.config import Config
from sqlalchemy import create_engine, inspect


def _make_alembic_config(database_url: str) -> Config:
    """Return an Alembic config pointing at the service migrations."""
    service_root = Path(__file__).resolve().parents[2]
    cfg = Config(str(service_root / "alembic.ini"))
    cfg.set_main_option("sqlalchemy.url", database_url)
    cfg.set_main_option("script_location", str(service_root / "migrations"))
    return cfg


def test_alembic_upgrade_and_downgrade_cycle(tmp_path) -> None:
    """Migrations build the full schema and cleanly downgrade back to base."""
    database_url = f"sqlite:///{tmp_path / 'jobboard.db'}"
    cfg = _make_alembic_config(database_url)

    command.upgrade(cfg, "head")
    engine = create_engine(database_url)
    try:
        tables = set(inspect(engine).get_table_names())
        assert {"candidates", "companies", "jobs", "job_candidates"} <= tables
        pk = inspect(engine).get_pk_constraint("job_candidates")
        assert set(pk["constrained_columns"]) == {"job_id", "candidate_id"}

        command.downgrade(cfg, "base")
        assert set(inspect(engine).get_table_names()) <= {"alembic_version"}
    finally:
        engine.dispose()
