# file1 - dashboard snapshot

from __future__ import annotations

import argparse
import json
import logging
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional

import pandas as pd
from tqdm import tqdm

from core.n2_1_api_ingestion import DEFAULT_API_URL, fetch_campaigns, load_campaigns_file
from core.n3_5_dashboard import DashboardViews, build_dashboard

# =============================
# CONFIG
# =============================
OUTPUT_DIR = Path(os.getenv("DASHBOARD_OUTPUT_DIR", "data/dashboard"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

# =============================
# OUTPUT WRITERS
# =============================
def write_snapshot(views: DashboardViews, output_dir: Path) -> dict[str, Path]:
    """Write one parquet per view table + summary.json. Returns written paths."""
    output_dir.mkdir(parents=True, exist_ok=True)

    tables: dict[str, pd.DataFrame] = {
        "weekly": views.weekly.weekly,
        "demographic": views.demographic.groups,
        "device": views.device.devices,
        "region": views.region.regions,
    }

    written: dict[str, Path] = {}
    for name, df in tables.items():
        path = output_dir / f"{name}.parquet"
        df.to_parquet(path, index=False)
        written[name] = path

    summary = views.summary()
    summary["generated_at"] = datetime.now(timezone.utc).isoformat()

    summary_path = output_dir / "summary.json"
    summary_path.write_text(json.dumps(summary, indent=2, default=float), encoding="utf-8")
    written["summary"] = summary_path

    return written

# =============================
# SNAPSHOT RUN
# =============================
def run_dashboard_snapshot(
    *,
    api_url: Optional[str] = None,
    input_json: Optional[Path] = None,
    output_dir: Path = OUTPUT_DIR,
) -> DashboardViews:
    print("\n===============================")
    print("📊 DASHBOARD SNAPSHOT START")
    print("===============================")

    steps = ["Load campaigns", "Aggregate views", "Write outputs"]
    pbar = tqdm(total=len(steps), desc="Snapshot", unit="step")

    # -------------------------------
    # 1. Load (file beats API)
    # -------------------------------
    if input_json is not None:
        print(f"[1/3] Loading campaigns from {input_json}...")
        campaigns = load_campaigns_file(input_json)
    else:
        print(f"[1/3] Fetching campaigns from {api_url or DEFAULT_API_URL}...")
        campaigns = fetch_campaigns(api_url)

    if not campaigns:
        pbar.close()
        raise RuntimeError("Campaign source returned no campaigns.")
    pbar.update(1)

    # -------------------------------
    # 2. Aggregate
    # -------------------------------
    print("[2/3] Aggregating weekly / demographic / device / region views...")
    views = build_dashboard(campaigns)
    pbar.update(1)

    if not views.device.is_complete:
        print(f"⚠️ Missing key device data: {', '.join(views.device.missing_devices)}")

    # -------------------------------
    # 3. Write
    # -------------------------------
    print("[3/3] Writing outputs...")
    written = write_snapshot(views, output_dir)
    pbar.update(1)
    pbar.close()

    print("✅ DASHBOARD SNAPSHOT COMPLETE.")
    print(f"Campaigns   -> {len(campaigns)}")
    print(f"Top region  -> {views.region.top_region}")
    print(f"Summary     -> {written['summary'].resolve()}")

    return views

# =============================
# CLI
# =============================
if __name__ == "__main__":
    parser = argparse.ArgumentParser("Dashboard snapshot")

    parser.add_argument(
        "--api-url",
        default=None,
        help="Campaign endpoint. CLI > MARKETING_API_URL env > built-in default.",
    )
    parser.add_argument(
        "--input-json",
        type=Path,
        default=None,
        help="Saved API response to aggregate instead of fetching.",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=OUTPUT_DIR,
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=LOG_LEVEL.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    run_dashboard_snapshot(
        api_url=args.api_url,
        input_json=args.input_json,
        output_dir=args.output_dir,
    )
