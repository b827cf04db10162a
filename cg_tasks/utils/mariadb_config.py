"""
MariaDB server settings required by Frappe.

Mirrors the my.cnf snippet from the setup guide:

	[mysqld]
	character-set-client-handshake = FALSE
	character-set-server = utf8mb4
	collation-server = utf8mb4_unicode_ci
	bind-address = 127.0.0.1

	[mysql]
	default-character-set = utf8mb4
"""

from typing import Dict, List, Mapping

# SHOW VARIABLES name -> expected value
REQUIRED_MARIADB_SETTINGS = {
	"character_set_server": "utf8mb4",
	"collation_server": "utf8mb4_unicode_ci",
}

MY_CNF_SECTIONS = {
	"mysqld": {
		"character-set-client-handshake": "FALSE",
		"character-set-server": "utf8mb4",
		"collation-server": "utf8mb4_unicode_ci",
		"bind-address": "127.0.0.1",
	},
	"mysql": {
		"default-character-set": "utf8mb4",
	},
}


def check_mariadb_variables(variables: Mapping[str, str]) -> List[str]:
	"""
	Compare server variables against the required settings.

	Args:
		variables: Mapping of variable name to value (e.g. from SHOW VARIABLES)

	Returns:
		list: Human readable mismatch messages, empty when everything matches
	"""
	problems = []
	for name, expected in REQUIRED_MARIADB_SETTINGS.items():
		actual = variables.get(name)
		if actual is None:
			problems.append(f"{name} is not reported by the server (expected {expected})")
		elif str(actual).lower() != expected:
			problems.append(f"{name} is {actual}, expected {expected}")
	return problems


def render_my_cnf(bind_address: str = "127.0.0.1") -> str:
	sections: Dict[str, Dict[str, str]] = {
		name: dict(values) for name, values in MY_CNF_SECTIONS.items()
	}
	sections["mysqld"]["bind-address"] = bind_address

	lines = []
	for section, values in sections.items():
		lines.append(f"[{section}]")
		lines.extend(f"{key} = {value}" for key, value in values.items())
		lines.append("")
	return "\n".join(lines)
