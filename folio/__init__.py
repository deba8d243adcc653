"""
FOLIO - Fill, Organize, Layout, Install Once

A portfolio site renderer: one structured career draft, projected through a
chosen page layout into a finished single-page site.

Architecture:
- Drafting Context: Draft data model, defaults, and normalization
- Rendering Context: Contact links, display policy, layout selection and HTML rendering
"""

__version__ = "0.1.0"
