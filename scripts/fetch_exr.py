"""
Demo script: fetch a few ECB series via the public API and export them.

Usage:
    uv run python scripts/fetch_exr.py              # last 10 observations
    uv run python scripts/fetch_exr.py --csv        # export as CSV instead

Each query gets its own output file under outputs/. The dataflow list is
exported alongside so flow ids can be looked up.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

# ---------------------------------------------------------------------------
# Configuration
# ---------------------------------------------------------------------------

QUERIES = [
    ("EXR", "D.USD.EUR.SP00.A"),   # US dollar / euro, daily
    ("EXR", "M.GBP.EUR.SP00.A"),   # pound sterling / euro, monthly
    ("ICP", "M.U2.N.000000.4.ANR"),  # HICP inflation, euro area
]

OUTPUT_ROOT = Path("outputs")

# ---------------------------------------------------------------------------
# Logging setup
# ---------------------------------------------------------------------------

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(levelname)-8s  %(name)s  %(message)s",
    datefmt="%H:%M:%S",
)
log = logging.getLogger("fetch_exr")


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main() -> None:
    import ecb_sdmx
    from ecb_sdmx.export import export_frame

    fmt = "csv" if "--csv" in sys.argv else "parquet"

    with ecb_sdmx.Client() as client:
        for flow, key in QUERIES:
            log.info("=" * 70)
            log.info("Fetching %s / %s", flow, key)
            try:
                records = ecb_sdmx.fetch_series(flow, key, last_n=10, client=client)
            except ecb_sdmx.HttpError as exc:
                log.error("  failed: %s", exc)
                continue

            df = ecb_sdmx.to_frame(records)
            path = OUTPUT_ROOT / f"{flow}_{key}.{fmt}"
            export_frame(df, path, output_format=fmt)
            log.info("  %d rows x %d cols -> %s", len(df), len(df.columns), path)

        flows = ecb_sdmx.entries_to_frame(ecb_sdmx.fetch_dataflows(client=client))
        export_frame(flows, OUTPUT_ROOT / f"dataflows.{fmt}", output_format=fmt)
        log.info("Exported %d dataflows", len(flows))

    log.info("All queries processed.")


if __name__ == "__main__":
    main()
