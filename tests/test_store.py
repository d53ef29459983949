import threading

from bookshelf_api.app.schemas.book import Book


def make_book(book_id, name="Book"):
    return Book(
        id=book_id,
        name=name,
        pageCount=10,
        readPage=0,
        finished=False,
        insertedAt="2024-01-01T00:00:00.000Z",
        updatedAt="2024-01-01T00:00:00.000Z",
    )


def test_add_and_list_preserves_order(store):
    for book_id in ("a", "b", "c"):
        store.add(make_book(book_id))
    assert [b.id for b in store.list()] == ["a", "b", "c"]
    assert len(store) == 3


def test_get_returns_copy(store):
    store.add(make_book("a", name="Original"))
    fetched = store.get("a")
    fetched.name = "Changed"
    assert store.get("a").name == "Original"


def test_get_unknown_returns_none(store):
    assert store.get("missing") is None


def test_update_replaces_in_place(store):
    for book_id in ("a", "b", "c"):
        store.add(make_book(book_id))
    updated = store.update("b", lambda current: current.model_copy(update={"name": "New"}))
    assert updated.name == "New"
    assert [b.id for b in store.list()] == ["a", "b", "c"]
    assert store.get("b").name == "New"


def test_update_unknown_does_not_call_apply(store):
    calls = []
    assert store.update("missing", lambda current: calls.append(current)) is None
    assert calls == []


def test_remove_keeps_order_of_others(store):
    for book_id in ("a", "b", "c"):
        store.add(make_book(book_id))
    assert store.remove("b") is True
    assert [b.id for b in store.list()] == ["a", "c"]
    assert store.remove("b") is False
    assert [b.id for b in store.list()] == ["a", "c"]


def test_clear(store):
    store.add(make_book("a"))
    store.clear()
    assert store.list() == []


def test_concurrent_adds_are_not_lost(store):
    def worker(prefix):
        for i in range(200):
            store.add(make_book(f"{prefix}-{i}"))

    threads = [threading.Thread(target=worker, args=(n,)) for n in range(8)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    assert len(store) == 8 * 200


def test_concurrent_updates_and_removes(store):
    store.add(make_book("counter"))
    doomed = [f"r-{i}" for i in range(400)]
    for book_id in doomed:
        store.add(make_book(book_id))

    def bump(current):
        return current.model_copy(update={"readPage": current.readPage + 1})

    def updater():
        for _ in range(250):
            store.update("counter", bump)

    removed = []

    def remover(ids):
        for book_id in ids:
            removed.append(store.remove(book_id))

    threads = [threading.Thread(target=updater) for _ in range(4)]
    threads += [threading.Thread(target=remover, args=(doomed[n::4],)) for n in range(4)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    assert removed == [True] * len(doomed)
    assert [b.id for b in store.list()] == ["counter"]
    assert store.get("counter").readPage == 4 * 250
