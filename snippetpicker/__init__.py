"""snippet-picker: search, page through and combine text snippets.

``main`` runs the ``snippet-picker`` command. The selection core lives in
``navigation``, ``combination``, ``search`` and ``model``; none of those
modules perform I/O.
"""

from __future__ import annotations

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)

__all__ = ["main"]
