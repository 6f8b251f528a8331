"""Request and database helpers shared by the HTTP tests"""
import sqlite3

from sqlalchemy.engine import make_url

from hallbooking.core.config import settings


def signup(client, email="a@x.com", username="alice", password="pw1"):
    return client.post("/submit-signup", json={
        "email": email,
        "username": username,
        "password": password,
    })


def login(client, email="a@x.com", password="pw1"):
    return client.post("/submit-login", json={"email": email, "password": password})


def fetch_rows(query: str) -> list:
    """Read the test database directly, bypassing the app"""
    conn = sqlite3.connect(make_url(settings.DATABASE_URL).database)
    try:
        return conn.execute(query).fetchall()
    finally:
        conn.close()
