"""Test data builders."""


def make_isbn(n: int) -> str:
    """A valid ISBN-13 in the 978 range derived from n."""
    body = f"978{n:09d}"
    checksum = sum((3 if index % 2 else 1) * int(char) for index, char in enumerate(body))
    return body + str((10 - checksum % 10) % 10)


def book_payload(n: int, **overrides) -> dict:
    payload = {
        "isbn": make_isbn(n),
        "title": f"Book {n}",
        "author": f"Author {n}",
        "publisher": "Gramedia",
        "published_at": "2020-05-01",
        "stock": n,
    }
    payload.update(overrides)
    return payload
