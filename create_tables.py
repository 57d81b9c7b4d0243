
import sys
import os

sys.path.append(os.getcwd())

from sitetrack.db.session import init_db

def create_tables():
    print("Creating all tables...")
    init_db()
    print("Tables created.")

if __name__ == "__main__":
    create_tables()
