"""Backup the key-value store.

Note: writes one JSON snapshot holding every key, whatever the backend
(file, mysql). Restore with `--restore <file>`.
"""

from __future__ import annotations

import argparse
import importlib
import json
import sys
from datetime import datetime
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.dayflow.dayflow.container import build_backend


def main() -> None:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("--restore", type=Path, help="snapshot file to load back into the store")
    args = parser.parse_args()

    settings = importlib.import_module(get_settings_module())
    backend = build_backend(
        settings.STORAGE_BACKEND,
        storage_dir=getattr(settings, "STORAGE_DIR", None),
        db_config=getattr(settings, "DB_CONFIG", None),
    )

    if args.restore:
        snapshot = json.loads(args.restore.read_text(encoding="utf-8"))
        for key, value in snapshot.items():
            backend.set_item(key, value)
        print(f"OK: Restored {len(snapshot)} key(s) from {args.restore}")
        return

    out_dir = REPO_ROOT / "backups"
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    out_file = out_dir / f"dayflow_{ts}.json"

    snapshot = {key: backend.get_item(key) for key in backend.keys()}
    out_file.write_text(json.dumps(snapshot, ensure_ascii=False, indent=2), encoding="utf-8")
    print(f"OK: Backup created: {out_file} ({len(snapshot)} key(s))")


if __name__ == "__main__":
    main()
