#!/usr/bin/env python3
"""Seed a demo author with a few posts.

Usage:
    DATABASE_URL=sqlite:///./blog.db python scripts/seed_demo_data.py
"""

import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.database import SessionLocal, init_db
from src.models import Post, User
from src.services.auth import create_user
from src.services.store import CredentialStore

DEMO_NAME = "Demo Author"
DEMO_EMAIL = "demo@example.com"
DEMO_PASSWORD = "demopass123"

DEMO_POSTS = [
    ("Hello, world", "First post on the new blog."),
    ("Notes on bearer tokens", "A token is reused until it expires, then a new one is minted."),
    ("Weekend reading", "A short list of articles worth a look."),
]


def seed_demo_data():
    """Seed the database with a demo user and posts."""
    init_db()
    session = SessionLocal()
    store = CredentialStore(session)

    try:
        existing_user = store.find_user_by_email(DEMO_EMAIL)
        if existing_user:
            print("Demo data already exists. Clearing and re-seeding...")
            session.query(Post).filter_by(author_id=existing_user.id).delete()
            session.query(User).filter_by(id=existing_user.id).delete()
            session.commit()

        print("Creating demo user...")
        user = create_user(store, DEMO_NAME, DEMO_EMAIL, DEMO_PASSWORD)

        for title, content in DEMO_POSTS:
            store.create_post(title, content, user.id)
        print(f"Created {len(DEMO_POSTS)} posts for {DEMO_EMAIL} (password: {DEMO_PASSWORD})")
    finally:
        session.close()


if __name__ == "__main__":
    seed_demo_data()
