from dataclasses import replace
from threading import RLock
from typing import Any, Iterable, List, Optional

from bookstore.core.utils import IDGenerator, parse_int
from bookstore.models.book import Book, Genre


class BookStore:
    """
    List-based in-memory store for books.

    Holds no business rules. The lock is re-entrant so a caller can hold it
    across a validate-then-mutate sequence while the primitives take it too.
    """
    def __init__(self, id_gen: Optional[IDGenerator] = None):
        self._storage: List[Book] = []
        self._id_gen = id_gen or IDGenerator()
        self.lock = RLock()

    def insert(
        self,
        title: str,
        author: str,
        year: int,
        price: int,
        genres: Iterable[Genre] = (),
    ) -> int:
        with self.lock:
            book = Book(
                id=self._id_gen.next_id(),
                title=title,
                author=author,
                year=year,
                price=price,
                genres=tuple(genres),
            )
            self._storage.append(book)
        return book.id

    def find_by_id(self, id: Any) -> Optional[Book]:
        book_id = parse_int(id)
        if book_id is None:
            return None
        with self.lock:
            for book in self._storage:
                if book.id == book_id:
                    return book
        return None

    def all(self) -> List[Book]:
        with self.lock:
            return list(self._storage)

    def remove_by_id(self, id: Any) -> bool:
        book_id = parse_int(id)
        if book_id is None:
            return False
        with self.lock:
            for idx, book in enumerate(self._storage):
                if book.id == book_id:
                    del self._storage[idx]
                    return True
        return False

    def replace_price(self, id: Any, price: int) -> Optional[int]:
        """Swap in a new price and return the old one, or None if absent."""
        book_id = parse_int(id)
        if book_id is None:
            return None
        with self.lock:
            for idx, book in enumerate(self._storage):
                if book.id == book_id:
                    self._storage[idx] = replace(book, price=price)
                    return book.price
        return None

    def count(self) -> int:
        with self.lock:
            return len(self._storage)

    def __len__(self) -> int:
        return self.count()
