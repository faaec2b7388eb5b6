"""
main.py — Group a handful of gamers
===================================

Loads examples/gamers.json into an in-memory service, forms groups
of three and prints each group's statistics.

    python examples/main.py

Set STORE_IN_DB=true to also persist the gamers to gamers.db.
"""

import json
from pathlib import Path

from gamer_pool import GamerPoolService, GamerRecord, load_config, setup_logging

# ── Configuration ──
config = load_config()
config.group_size = 3

setup_logging(config.log_file)

service = GamerPoolService.from_config(config)
try:
    payload = json.loads((Path(__file__).parent / "gamers.json").read_text(encoding="utf-8"))
    for item in payload:
        service.add_gamer(GamerRecord.from_payload(item))

    for group in service.get_groups():
        stats = service.get_group_stats(group.number)
        print(f"Group {group.number}: {', '.join(sorted(stats.player_names))}")
        print(f"  skill   {stats.min_skill:.0f}..{stats.max_skill:.0f} (avg {stats.avg_skill:.1f})")
        print(f"  latency {stats.min_latency:.0f}..{stats.max_latency:.0f} (avg {stats.avg_latency:.1f})")

    print(f"Still waiting: {', '.join(service.engine.waiting()) or 'nobody'}")
finally:
    service.close()
