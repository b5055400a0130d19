from typing import Optional, Tuple


class SearchIndex:
    """Row-major substring matches with a cyclic result pointer."""

    def __init__(self):
        self.query = ""
        self.case_sensitive = False
        self.results: list[Tuple[int, int]] = []
        self.position = 0

    def perform(self, grid, query: str, case_sensitive: bool = False) -> int:
        self.query = query
        self.case_sensitive = case_sensitive
        self.position = 0
        self.results = []
        if not query:
            return 0
        needle = query if case_sensitive else query.casefold()
        for r, row in enumerate(grid.rows):
            for c, text in enumerate(row):
                hay = text if case_sensitive else text.casefold()
                if needle in hay:
                    self.results.append((r, c))
        return len(self.results)

    @property
    def current(self) -> Optional[Tuple[int, int]]:
        if not self.results:
            return None
        return self.results[self.position]

    def next(self) -> Optional[Tuple[int, int]]:
        if not self.results:
            return None
        self.position = (self.position + 1) % len(self.results)
        return self.current

    def prev(self) -> Optional[Tuple[int, int]]:
        if not self.results:
            return None
        self.position = (self.position - 1) % len(self.results)
        return self.current

    def clear(self):
        self.query = ""
        self.results = []
        self.position = 0
