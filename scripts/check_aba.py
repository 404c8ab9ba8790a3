"""
Demo script: parse ABA files and log a per-batch summary via the public API.

Usage:
    uv run python scripts/check_aba.py payments.aba              # decode only
    uv run python scripts/check_aba.py payments.aba --validate   # stop on first invalid batch
    uv run python scripts/check_aba.py payments.aba --export out # also write parquet tables
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("check_aba")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> int:
    import aba_ingest

    args = sys.argv[1:]
    validate = "--validate" in args
    export_dir = None
    if "--export" in args:
        idx = args.index("--export")
        if idx + 1 >= len(args):
            log.error("--export needs an output directory")
            return 2
        export_dir = args[idx + 1]
        del args[idx:idx + 2]
    paths = [a for a in args if not a.startswith("--")]

    if not paths:
        log.error("Usage: check_aba.py FILE [FILE ...] [--validate] [--export DIR]")
        return 2

    status = 0
    for path in paths:
        if not Path(path).exists():
            log.warning("SKIP  %s  (file not found)", path)
            continue

        log.info("=" * 70)
        log.info("Processing: %s", path)
        try:
            batches = aba_ingest.parse_file(path, validation=validate)
        except aba_ingest.InvalidBatchError as exc:
            log.error("  %s", exc)
            status = 1
            continue

        parser = aba_ingest.AbaParser()
        for index, (batch, result) in enumerate(
            zip(batches, parser.validate_all(batches))
        ):
            footer = batch.footer
            log.info(
                "  Batch %d: %d transaction(s), credit %.2f, debit %.2f -- %s",
                index,
                len(batch.transactions),
                footer.get("creditTotal", 0),
                footer.get("debitTotal", 0),
                result.message,
            )
            if not result.success:
                status = 1

        if export_dir is not None:
            out = Path(export_dir) / Path(path).stem
            aba_ingest.export_batches(batches, out)

    return status


if __name__ == "__main__":
    sys.exit(main())
