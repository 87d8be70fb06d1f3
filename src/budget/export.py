#!/usr/bin/env python3
"""
JSON Export

Writes every store of a loaded ledger to <dest>/<entity>s.json. Values use
the same canonical text as the .data files, so amounts stay exact.
"""

import logging
from pathlib import Path

from .core.json_utils import write_json
from .ledger import Ledger

logger = logging.getLogger(__name__)


def export_ledger(ledger: Ledger, dest: Path) -> list[Path]:
    """
    Export all stores of a loaded ledger as JSON files.

    Returns:
        Paths of the written files
    """
    dest = Path(dest)
    written = []
    for store in ledger.stores:
        target = dest / f"{store.label}.json"
        write_json(target, [store.codec.to_dict(record) for record in store])
        logger.info(f"Exported {len(store)} {store.label} to {target}")
        written.append(target)
    return written
