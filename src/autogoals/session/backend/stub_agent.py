"""Local stand-in agent for session runner integration tests.

Runs in the project directory like the real agent, optionally marks every
goal completed once it has been invoked ``--complete-after`` times, and exits
with ``--exit-code``.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

import yaml

_RUN_COUNTER_FILE = ".stub_agent_runs"


def main(argv: list[str] | None = None) -> int:
    """Run one deterministic fake session."""

    parser = argparse.ArgumentParser()
    parser.add_argument("--goals-file", default="goals.yaml")
    parser.add_argument("--complete", action="store_true")
    parser.add_argument("--complete-after", type=int, default=1)
    parser.add_argument("--exit-code", type=int, default=0)
    args = parser.parse_args(argv)

    counter_path = Path(_RUN_COUNTER_FILE)
    runs = int(counter_path.read_text("utf-8")) if counter_path.exists() else 0
    runs += 1
    counter_path.write_text(str(runs), "utf-8")
    print(f"stub agent run #{runs}")

    if args.complete and runs >= args.complete_after:
        goals_path = Path(args.goals_file)
        payload = yaml.safe_load(goals_path.read_text("utf-8")) or {}
        for goal in payload.get("goals") or []:
            goal["status"] = "completed"
        goals_path.write_text(yaml.safe_dump(payload, sort_keys=False), "utf-8")

    return args.exit_code


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
