from __future__ import annotations

import logging
import sys
from pathlib import Path

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory

from .db import make_engine
from .settings import get_database_url

logger = logging.getLogger(__name__)


def _alembic_config(url: str) -> Config:
    base_dir = Path(__file__).resolve().parent.parent
    cfg = Config(str(base_dir / "alembic.ini"))
    cfg.set_main_option("script_location", str(base_dir / "alembic"))
    # ConfigParser interpolates '%', which URL-encoded passwords contain
    cfg.set_main_option("sqlalchemy.url", url.replace("%", "%%"))
    return cfg


def run_migrations(url: str | None = None) -> None:
    """Upgrade the database to the latest revision, skipping the call when already there."""
    url = url or get_database_url()
    alembic_cfg = _alembic_config(url)

    script = ScriptDirectory.from_config(alembic_cfg)
    head = script.get_current_head()

    engine = make_engine(url)
    try:
        with engine.connect() as connection:
            current_heads = MigrationContext.configure(connection).get_current_heads()
    finally:
        # Release the pool before Alembic opens its own connection
        engine.dispose()

    if head in current_heads:
        logger.info("Database is up to date (revision: %s), skipping migrations.", head)
        return

    logger.info("Current revision(s): %s, target revision: %s. Running migrations...", current_heads, head)
    try:
        command.upgrade(alembic_cfg, "head")
    except Exception:
        logger.error("run_migrations: upgrade to %s failed", head, exc_info=True)
        raise
    logger.info("run_migrations: completed successfully.")


def main() -> int:
    from dotenv import load_dotenv

    from .settings import log_level

    load_dotenv()
    logging.basicConfig(level=log_level(), format="%(asctime)s [%(levelname)s] %(message)s")
    run_migrations()
    return 0


if __name__ == "__main__":
    sys.exit(main())
