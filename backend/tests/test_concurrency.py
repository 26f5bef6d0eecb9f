import threading

from app.errors import NotFound
from app.models import Book
from app.repositories import ResourceStore


def _run_threads(target, n):
    threads = [threading.Thread(target=target, args=(i,)) for i in range(n)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()


def test_concurrent_creates_keep_ids_unique():
    store = ResourceStore(label_field="title")

    def worker(i):
        for j in range(50):
            store.create(Book(title=f"{i}-{j}", author="x", year=j))

    _run_threads(worker, 8)
    records = store.list()
    assert len(records) == 400
    assert len({r.id for r in records}) == 400
    for r in records[::37]:
        assert store.get(r.id) == r


def test_concurrent_deletes_of_same_id_succeed_once():
    store = ResourceStore(label_field="title")
    target = store.create(Book(title="t", author="x", year=1))
    keep = store.create(Book(title="k", author="x", year=2))
    outcomes = []
    lock = threading.Lock()

    def worker(_i):
        try:
            store.delete(target.id)
            result = "deleted"
        except NotFound:
            result = "missing"
        with lock:
            outcomes.append(result)

    _run_threads(worker, 10)
    assert outcomes.count("deleted") == 1
    assert outcomes.count("missing") == 9
    assert store.list() == [keep]


def test_replace_racing_delete_never_resurrects():
    store = ResourceStore(label_field="title")
    target = store.create(Book(title="t", author="x", year=1))
    errors = []

    def worker(i):
        try:
            if i % 2:
                store.delete(target.id)
            else:
                store.replace(target.id, Book(title=f"r{i}", author="x", year=i))
        except NotFound:
            errors.append(i)

    _run_threads(worker, 20)
    assert store.list() == []
