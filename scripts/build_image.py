"""
Build a custom Frappe image containing the apps listed in apps.json

Usage:
    python scripts/build_image.py apps.json --tag cg/cg_tasks:latest [--frappe-branch version-15] [--run]

Without --run the docker command is printed only.
"""

import argparse
import json
import subprocess
import sys

from cg_tasks.utils.build_config import (
	DEFAULT_CONTAINERFILE,
	DEFAULT_FRAPPE_BRANCH,
	docker_build_command,
)
from cg_tasks.utils.email_config import ConfigError


def parse_args(argv=None):
	parser = argparse.ArgumentParser(description="Build a Frappe image with custom apps")
	parser.add_argument("apps_json", help="Path to apps.json")
	parser.add_argument("--tag", required=True, help="Image tag, e.g. cg/cg_tasks:latest")
	parser.add_argument("--frappe-branch", default=DEFAULT_FRAPPE_BRANCH)
	parser.add_argument("--containerfile", default=DEFAULT_CONTAINERFILE)
	parser.add_argument("--context", default=".")
	parser.add_argument("--no-cache", action="store_true")
	parser.add_argument("--run", action="store_true", help="Run docker build instead of printing it")
	return parser.parse_args(argv)


def main(argv=None):
	args = parse_args(argv)

	with open(args.apps_json) as f:
		apps = json.load(f)

	try:
		command = docker_build_command(
			apps,
			tag=args.tag,
			frappe_branch=args.frappe_branch,
			containerfile=args.containerfile,
			context=args.context,
			no_cache=args.no_cache,
		)
	except ConfigError as e:
		print(f"✗ {e}", file=sys.stderr)
		return 1

	if not args.run:
		print(" ".join(command))
		return 0

	print(f"Building {args.tag} with {len(apps)} app(s) on {args.frappe_branch}...")
	return subprocess.call(command)


if __name__ == "__main__":
	sys.exit(main())
