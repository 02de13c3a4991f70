# guardian/scripts/init_db.py
import logging

from guardian.db import Base, engine

# Imported for their side effect of registering tables on Base.metadata
from guardian.models import core, policy, report, telemetry  # noqa: F401

logger = logging.getLogger(__name__)


def apply_schema():
    Base.metadata.create_all(bind=engine)
    logger.info(f"Schema applied: {len(Base.metadata.tables)} tables")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    apply_schema()
