"""
Add colleges to the public directory.
Usage: python -m placement_portal.scripts.seed_colleges "IIT Delhi" "NIT Trichy"
"""
import argparse
import sys

from placement_portal.database import SessionLocal, ensure_tables_exist
from placement_portal.repos.college_repo import seed_colleges


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Create colleges that do not exist yet.")
    parser.add_argument("names", nargs="+", help="College names")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    ensure_tables_exist()
    db = SessionLocal()
    try:
        colleges, created = seed_colleges(db, args.names)
        # Read while the session is open; each create commits and expires earlier rows
        rows = [(college.id, college.name) for college in colleges]
    finally:
        db.close()
    for college_id, name in rows:
        print(f"{college_id}\t{name}")
    print(f"Created {created} of {len(rows)} colleges.")
    return 0


if __name__ == "__main__":
    sys.exit(main())
