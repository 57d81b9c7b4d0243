
import sys
import os

sys.path.append(os.getcwd())

from sitetrack.db.session import SessionLocal, init_db
from sitetrack.utils.seed import seed_test_data, clear_test_data

def main(argv):
    init_db()
    db = SessionLocal()
    try:
        if argv and argv[0] == "clear":
            print("Clearing test data...")
            result = clear_test_data(db)
            for table, count in result["deleted"].items():
                print(f"  deleted {count} {table}")
        else:
            print("Seeding test data...")
            result = seed_test_data(db)
            for table, count in result["created"].items():
                print(f"  created {count} {table}")
            if not result["created"]["project_assignments"]:
                print("No users yet, skipped project assignments.")
    finally:
        db.close()

if __name__ == "__main__":
    main(sys.argv[1:])
