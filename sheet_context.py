from dataclasses import dataclass, field
from typing import Any, Callable, Optional, Tuple

from edit_session import EditSession
from search_index import SearchIndex
from selection import NO_SELECTION


@dataclass
class SheetContext:
    state: Any
    _set_status: Callable[[str, float], None]
    clipboard: Any = None

    # Transient session state, never persisted with the document
    selection: Any = NO_SELECTION
    edit: EditSession = field(default_factory=EditSession)
    search: SearchIndex = field(default_factory=SearchIndex)
    drag_anchor: Optional[Tuple[int, int]] = None

    @property
    def grid(self):
        return self.state.grid

    def reset_session(self):
        self.selection = NO_SELECTION
        self.edit.cancel()
        self.search.clear()
        self.drag_anchor = None
