"""Book stock manager: a CRUD service for a book inventory."""
