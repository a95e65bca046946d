"""
CLI for gitlab_tasks.

Usage:
    python -m gitlab_tasks run flow.yaml
    python -m gitlab_tasks run flow.yaml --log-format json --log-level DEBUG

Runs every task of a flow document in order and prints the outputs as JSON,
keyed by task id. Connection values missing from a task come from GITLAB_*.
"""

import argparse
import json
import sys
from pathlib import Path

from gitlab_tasks.core.exceptions import GitLabError
from gitlab_tasks.infrastructure.observability import configure_logging
from gitlab_tasks.tasks import load_tasks


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gitlab-tasks",
        description="Run GitLab merge request and issue tasks from a flow document",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("command", choices=["run"], help="Command to execute")
    parser.add_argument("flow", type=Path, help="Path to the YAML flow document")
    parser.add_argument("--log-level", type=str, default=None, help="Log level (default: LOG_LEVEL or INFO)")
    parser.add_argument(
        "--log-format",
        choices=["console", "json"],
        default=None,
        help="Log renderer (default: LOG_FORMAT or console)",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level, log_format=args.log_format, stream=sys.stderr)

    try:
        tasks = load_tasks(args.flow.read_text(encoding="utf-8"))
        outputs = {task.id: task.run().model_dump(by_alias=True) for task in tasks}
    except OSError as e:
        print(f"Error reading flow: {e}", file=sys.stderr)
        return 1
    except GitLabError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(outputs, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
