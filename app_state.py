from column_widths import ColumnWidths
from grid_model import Grid
from undo_history import UndoHistory


class AppState:
    def __init__(
        self,
        grid=None,
        file_path=None,
        file_handler=None,
        frozen_header: bool = False,
        undo_max_depth: int = 50,
        default_column_width: int = 12,
    ):
        self.file_path = file_path
        self.file_handler = file_handler

        self.grid: Grid = grid if grid is not None else Grid.blank()
        self.dirty = False
        self.frozen_header = frozen_header

        self.column_widths = ColumnWidths(default=default_column_width)
        self.history = UndoHistory(max_depth=undo_max_depth)
        self.sort_marker = None

    @classmethod
    def from_config(cls, cfg, grid=None, file_path=None, file_handler=None):
        return cls(
            grid,
            file_path,
            file_handler,
            frozen_header=cfg.get("FROZEN_HEADER", False),
            undo_max_depth=cfg.get("UNDO_MAX_DEPTH", 50),
            default_column_width=cfg.get("DEFAULT_COLUMN_WIDTH", 12),
        )

    @property
    def undo_stack(self):
        return self.history.undo_stack

    @property
    def redo_stack(self):
        return self.history.redo_stack

    @property
    def shape(self) -> tuple[int, int]:
        return (self.grid.row_count, self.grid.col_count)

    def new_document(self):
        self.grid = Grid.blank()
        self.file_path = None
        self.file_handler = None
        self._reset_document()

    def replace_grid(self, rows, file_path=None, file_handler=None):
        self.grid = Grid.from_rows(rows)
        self.file_path = file_path
        self.file_handler = file_handler
        self._reset_document()

    def _reset_document(self):
        self.history.clear()
        self.column_widths.reset()
        self.sort_marker = None
        self.dirty = False

    def rows_for_save(self) -> list[list[str]]:
        return self.grid.to_rows()
