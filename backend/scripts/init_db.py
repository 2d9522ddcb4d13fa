"""Initialize the database: create the blogs/users tables and any missing columns or indexes."""
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from wordblog.database import engine, Base
import wordblog.models  # noqa: F401 - registers all models
from wordblog.utils.schema_sync import sync_schema


def init_db():
    print(f"Synchronizing schema for {engine.url.render_as_string(hide_password=True)}...")
    added = sync_schema(engine, Base.metadata)
    for item in added:
        print(f"  + {item}")
    print("Database initialized successfully." if added else "Schema already up to date.")


if __name__ == "__main__":
    init_db()
