"""ISBN-10 / ISBN-13 checksum validation."""
import re

_ISBN10_RE = re.compile(r"^[0-9]{9}[0-9X]$")
_ISBN13_RE = re.compile(r"^97[89][0-9]{10}$")

# Width of the isbn column; values are stored as submitted.
MAX_ISBN_LENGTH = 17
# At most this many hyphens and this many spaces may separate the groups.
MAX_SEPARATORS = 4


def normalize_isbn(value: str) -> str:
    """Strip the hyphens and spaces allowed between ISBN groups."""
    return value.replace("-", "", MAX_SEPARATORS).replace(" ", "", MAX_SEPARATORS)


def is_valid_isbn10(value: str) -> bool:
    digits = normalize_isbn(value)
    if not _ISBN10_RE.match(digits):
        return False

    checksum = 0
    for position, char in enumerate(digits, start=1):
        digit = 10 if char == "X" else int(char)
        checksum += position * digit
    return checksum % 11 == 0


def is_valid_isbn13(value: str) -> bool:
    digits = normalize_isbn(value)
    if not _ISBN13_RE.match(digits):
        return False

    checksum = 0
    for index, char in enumerate(digits[:12]):
        weight = 3 if index % 2 else 1
        checksum += weight * int(char)
    return (10 - checksum % 10) % 10 == int(digits[12])


def is_valid_isbn(value: str) -> bool:
    """Return True when value is a well-formed ISBN-10 or ISBN-13."""
    if not isinstance(value, str) or len(value) > MAX_ISBN_LENGTH:
        return False
    return is_valid_isbn10(value) or is_valid_isbn13(value)
