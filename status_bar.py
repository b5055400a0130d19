import os
import time

from grid_model import column_letter


def cell_name(cell) -> str:
    if cell is None:
        return ""
    row, col = cell
    return f"{column_letter(col)}{row + 1}"


def render_status(context, width):
    """
    context keys: status_msg, status_until, editing, dirty, file_path, shape,
                   cursor, sort_marker, frozen_header, matches
    """
    text = ""
    now = time.time()
    if context.get("status_msg") and now < context.get("status_until", 0):
        text = f" {context['status_msg']}"
    else:
        mode = "EDIT" if context.get("editing") else "READY"
        fname = context.get("file_path") or "[new]"
        fname = os.path.basename(fname)
        if context.get("dirty"):
            fname += " *"
        rows, cols = context.get("shape", (0, 0))
        parts = [mode, fname, f"{rows}x{cols}"]
        cursor = cell_name(context.get("cursor"))
        if cursor:
            parts.append(cursor)
        marker = context.get("sort_marker")
        if marker is not None:
            direction = "asc" if marker.ascending else "desc"
            parts.append(f"sorted {column_letter(marker.column)} {direction}")
        if context.get("frozen_header"):
            parts.append("header frozen")
        matches = context.get("matches")
        if matches:
            parts.append(f"{matches} matches")
        parts.append("F1 help")
        text = " " + " | ".join(parts)

    return text.ljust(width)[:width]
