from .mapping_table import render_element_table, render_mapping_table

__all__ = ["render_element_table", "render_mapping_table"]
