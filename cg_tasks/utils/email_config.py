"""
Outgoing email configuration for CG Tasks sites.

Docker deployments pass the mail settings as environment variables; bench
deployments put the same values, lowercased, in common_site_config.json:

	EMAIL_ID            email_id             sender / login address
	EMAIL_PASSWORD      email_password       login password or app password
	EMAIL_SERVICE       email_service        provider label (GMail, Outlook.com, ...)
	EMAIL_ACCOUNT_NAME  email_account_name   Email Account document name
	SMTP_SERVER         smtp_server
	SMTP_PORT           smtp_port
	USE_TLS             use_tls              STARTTLS
	USE_SSL             use_ssl              implicit SSL

Environment variables take precedence over site config.
"""

import re
from typing import Any, Dict, Mapping, Optional

ENV_KEYS = (
	"EMAIL_ID",
	"EMAIL_PASSWORD",
	"EMAIL_SERVICE",
	"EMAIL_ACCOUNT_NAME",
	"SMTP_SERVER",
	"SMTP_PORT",
	"USE_TLS",
	"USE_SSL",
)

DEFAULT_SMTP_PORT = 587
DEFAULT_SSL_PORT = 465
DEFAULT_SERVICE = "Other"

# Providers with well-known SMTP hosts
SERVICE_SERVERS = {
	"GMail": "smtp.gmail.com",
	"Outlook.com": "smtp-mail.outlook.com",
	"Yahoo Mail": "smtp.mail.yahoo.com",
	"Sendgrid": "smtp.sendgrid.net",
}

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off", ""}
_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class ConfigError(ValueError):
	"""Raised for invalid deployment configuration values."""


def parse_bool(value: Any, key: str) -> Optional[bool]:
	if value is None:
		return None
	if isinstance(value, bool):
		return value
	if isinstance(value, int):
		return bool(value)

	text = str(value).strip().lower()
	if text in _TRUE:
		return True
	if text in _FALSE:
		return False
	raise ConfigError(f"{key} must be a boolean, got {value!r}")


def parse_port(value: Any) -> Optional[int]:
	if value in (None, ""):
		return None
	try:
		port = int(value)
	except (TypeError, ValueError):
		raise ConfigError(f"SMTP_PORT must be an integer, got {value!r}")
	if not 1 <= port <= 65535:
		raise ConfigError(f"SMTP_PORT out of range: {port}")
	return port


class EmailConfig:
	"""Validated outgoing mail settings."""

	def __init__(self, email_id, password, service=DEFAULT_SERVICE, account_name=None,
			smtp_server=None, smtp_port=None, use_tls=None, use_ssl=None):
		if not _EMAIL_RE.match(email_id or ""):
			raise ConfigError(f"EMAIL_ID is not a valid email address: {email_id!r}")

		if use_tls and use_ssl:
			raise ConfigError("USE_TLS and USE_SSL cannot both be enabled")

		if use_tls is None and use_ssl is None:
			use_tls = True

		self.email_id = email_id
		self.password = password
		self.service = service or DEFAULT_SERVICE
		self.account_name = account_name or email_id
		self.smtp_server = smtp_server or SERVICE_SERVERS.get(self.service)
		self.use_tls = bool(use_tls)
		self.use_ssl = bool(use_ssl)
		self.smtp_port = smtp_port or (DEFAULT_SSL_PORT if self.use_ssl else DEFAULT_SMTP_PORT)

		if not self.smtp_server:
			raise ConfigError(f"SMTP_SERVER is required for email service {self.service!r}")

	def to_site_config(self) -> Dict[str, Any]:
		"""JSON form stored in common_site_config.json."""
		return {
			"email_id": self.email_id,
			"email_password": self.password,
			"email_service": self.service,
			"email_account_name": self.account_name,
			"smtp_server": self.smtp_server,
			"smtp_port": self.smtp_port,
			"use_tls": int(self.use_tls),
			"use_ssl": int(self.use_ssl),
		}

	def to_email_account(self) -> Dict[str, Any]:
		"""Field values for a Frappe Email Account document."""
		return {
			"email_account_name": self.account_name,
			"email_id": self.email_id,
			"password": self.password,
			"service": self.service,
			"smtp_server": self.smtp_server,
			"smtp_port": self.smtp_port,
			"use_tls": int(self.use_tls),
			"use_ssl_for_outgoing": int(self.use_ssl),
			"enable_outgoing": 1,
			"enable_incoming": 0,
			"default_outgoing": 1,
			"login_id_is_different": 0,
		}

	def __repr__(self):
		return (
			f"EmailConfig(email_id={self.email_id!r}, service={self.service!r}, "
			f"smtp_server={self.smtp_server!r}, smtp_port={self.smtp_port})"
		)


def load_email_config(environ: Mapping[str, str], site_config: Optional[Mapping[str, Any]] = None) -> Optional[EmailConfig]:
	"""
	Resolve email settings from the environment and site config.

	Returns:
		EmailConfig, or None when no email id / password is configured

	Raises:
		ConfigError: If a value is present but invalid
	"""
	site_config = site_config or {}

	def lookup(key):
		value = environ.get(key)
		if value in (None, ""):
			value = site_config.get(key.lower())
		return value

	email_id = lookup("EMAIL_ID")
	password = lookup("EMAIL_PASSWORD")
	if not email_id or not password:
		return None

	return EmailConfig(
		email_id=str(email_id).strip(),
		password=password,
		service=lookup("EMAIL_SERVICE"),
		account_name=lookup("EMAIL_ACCOUNT_NAME"),
		smtp_server=lookup("SMTP_SERVER"),
		smtp_port=parse_port(lookup("SMTP_PORT")),
		use_tls=parse_bool(lookup("USE_TLS"), "USE_TLS"),
		use_ssl=parse_bool(lookup("USE_SSL"), "USE_SSL"),
	)
