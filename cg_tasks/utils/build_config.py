"""
Docker image build helpers.

The frappe_docker layered Containerfile installs custom apps listed in an
apps.json file passed as a base64 build argument:

	[{"url": "https://github.com/org/cg_tasks", "branch": "main"}]

	docker build --build-arg FRAPPE_BRANCH=version-15 \
		--build-arg APPS_JSON_BASE64=<base64 of apps.json> \
		--tag cg/cg_tasks:latest --file images/layered/Containerfile .
"""

import base64
import json
import re
from typing import Any, Dict, Iterable, List

from cg_tasks.utils.email_config import ConfigError

DEFAULT_FRAPPE_BRANCH = "version-15"
DEFAULT_CONTAINERFILE = "images/layered/Containerfile"

_URL_RE = re.compile(r"^(https?://\S+|git@[^:\s]+:\S+)$")


def build_apps_json(apps: Iterable[Dict[str, Any]]) -> List[Dict[str, str]]:
	"""
	Validate apps.json entries.

	Args:
		apps: Iterable of {"url": ..., "branch": ...} dicts

	Returns:
		list: Clean entries, first occurrence of each url kept

	Raises:
		ConfigError: On a missing or malformed url or branch
	"""
	result = []
	seen = set()

	for index, app in enumerate(apps):
		if not isinstance(app, dict):
			raise ConfigError(f"apps.json entry {index} must be an object")

		url = str(app.get("url") or "").strip()
		branch = str(app.get("branch") or "").strip()

		if not _URL_RE.match(url):
			raise ConfigError(f"apps.json entry {index} has an invalid url: {url!r}")
		if not branch:
			raise ConfigError(f"apps.json entry {index} is missing a branch")

		if url in seen:
			continue
		seen.add(url)
		result.append({"url": url, "branch": branch})

	if not result:
		raise ConfigError("apps.json must list at least one app")

	return result


def encode_apps_json(apps: Iterable[Dict[str, Any]]) -> str:
	"""Base64 of the compact apps.json, as expected by APPS_JSON_BASE64."""
	payload = json.dumps(build_apps_json(apps), separators=(",", ":"))
	return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def decode_apps_json(value: str) -> List[Dict[str, str]]:
	try:
		data = json.loads(base64.b64decode(value, validate=True).decode("utf-8"))
	except (ValueError, UnicodeDecodeError) as e:
		raise ConfigError(f"APPS_JSON_BASE64 is not valid base64 JSON: {e}")
	return build_apps_json(data)


def docker_build_command(apps, tag, frappe_branch=DEFAULT_FRAPPE_BRANCH,
		containerfile=DEFAULT_CONTAINERFILE, context=".", no_cache=False) -> List[str]:
	"""Return the docker build argv for a custom image."""
	if not tag:
		raise ConfigError("An image tag is required")
	if not frappe_branch:
		raise ConfigError("FRAPPE_BRANCH is required")

	command = [
		"docker", "build",
		"--build-arg", f"FRAPPE_BRANCH={frappe_branch}",
		"--build-arg", f"APPS_JSON_BASE64={encode_apps_json(apps)}",
		"--tag", tag,
		"--file", containerfile,
	]
	if no_cache:
		command.append("--no-cache")
	command.append(context)
	return command
