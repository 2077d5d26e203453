"""
Create any missing portal tables; existing tables and rows are left alone.
Usage: python -m placement_portal.scripts.ensure_tables
"""
from placement_portal.database import ensure_tables_exist


def main():
    created = ensure_tables_exist()
    if created:
        print(f"Created tables: {', '.join(created)}")
    else:
        print("Schema already complete; no tables created.")


if __name__ == "__main__":
    main()
