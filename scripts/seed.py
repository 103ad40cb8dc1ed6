from volley_stats.core.config import settings
from volley_stats.core.logging import setup_logging
from volley_stats.db.session import engine, Session, init_db

from volley_stats.db.seed import DEFAULT_SEED_PATH, seed_all

def run_seed():
    setup_logging(log_dir=settings.LOG_DIR, level=settings.LOG_LEVEL)
    init_db()
    with Session(engine) as session:
        seed_all(session=session, seed_path=DEFAULT_SEED_PATH)

if __name__ == "__main__":
    run_seed()
