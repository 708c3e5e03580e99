"""Read-only POS-tag and tense reference tables."""

from .tables import ReferenceTables, explain_tag, load_reference_tables, tags_in_example

__all__ = ["ReferenceTables", "load_reference_tables", "explain_tag", "tags_in_example"]
