"""Domain layer for homefin application.

Services live in their own modules (``homefin.domain.account`` and so on)
and are imported from there; this package stays import-free so the
database layer can depend on ``homefin.domain.entities`` without a cycle.
"""
