import argparse

from app.core.db import Base, SessionLocal, engine
from app.core.logging import configure_logging_if_needed
from app.jobs.seed.seed_reference_data import seed_reference_data
import app.models  # noqa: F401  registers tables on Base.metadata


def main():
    p = argparse.ArgumentParser(description="Seed airlines, airports, routes, incidents and sample flights")
    p.add_argument("--flights-seed", type=int, help="RNG seed for synthetic flights (default: random)")
    p.add_argument("--keep-existing", action="store_true", help="Do not clear tables before inserting")
    p.add_argument("--create-tables", action="store_true", help="Run metadata.create_all first")
    args = p.parse_args()

    configure_logging_if_needed()

    if args.create_tables:
        Base.metadata.create_all(bind=engine)

    db = SessionLocal()
    try:
        res = seed_reference_data(
            db,
            flights_seed=args.flights_seed,
            keep_existing=args.keep_existing,
        )
        print(res)
    finally:
        db.close()


if __name__ == "__main__":
    main()
