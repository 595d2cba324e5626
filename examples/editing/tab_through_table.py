"""Simulate pressing Tab through a table, the way an editor plugin would."""

from orgtable import Cursor, apply_edit, next_cell

document = ["* Groceries", "|item|qty|", "|---|", "|tea|2|", "", "Notes."]
cursor = Cursor(line=1, character=1)

for _ in range(5):
    edit = next_cell(document, cursor)
    if edit is None:
        break
    document = apply_edit(document, edit)
    if edit.cursor is not None:
        cursor = edit.cursor
    print(f"cursor -> {cursor.line}:{cursor.character}")

print()
print("\n".join(document))
