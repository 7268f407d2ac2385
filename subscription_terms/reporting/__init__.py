from .format import render_failures, render_report, render_terms_table

__all__ = ["render_terms_table", "render_failures", "render_report"]
