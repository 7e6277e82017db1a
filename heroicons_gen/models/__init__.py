from heroicons_gen.models.icon import IconRecord, StyleSet

__all__ = ["IconRecord", "StyleSet"]
