"""Run a quick smoke test against the app.

Uses FastAPI's TestClient to hit `/health` and round-trip one book
through create, fetch and delete against the seeded in-memory stores.
"""

import sys
import os

# Ensure backend folder is on sys.path so `app` package can be imported
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from fastapi.testclient import TestClient
from app.main import app


def run_testclient():
    client = TestClient(app)
    resp = client.get('/health')
    print('STATUS:', resp.status_code, resp.json())
    created = client.post('/books', json={'title': 'Smoke Test', 'author': 'Script', 'year': 2024})
    print('CREATE:', created.status_code, created.json())
    book_id = created.json()['id']
    print('GET:', client.get(f'/books/{book_id}').status_code)
    print('DELETE:', client.delete(f'/books/{book_id}').status_code)
    print('STATS:', client.get('/books/statistics').json())


if __name__ == '__main__':
    run_testclient()
