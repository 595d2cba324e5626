"""Align a ragged table in 4 lines: parse, measure, format."""

from orgtable import calc_col_widths, format_table_rows_with_indents, get_indent, split_table_rows

lines = ["  |name|qty|", "  |-", "  |日本茶|12|", "  |coffee|3|"]
rows = split_table_rows(lines)
widths = calc_col_widths(rows)
print("\n".join(format_table_rows_with_indents(rows, widths, [get_indent(t) for t in lines])))
