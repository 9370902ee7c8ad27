# =============================================================================
# core/config.py  —  WHMCS connection settings
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Reads the four WHMCS settings from the environment into an immutable
#   WHMCSConfig.  The config is built ONCE by an entry point and then handed
#   to the gateway explicitly; nothing in core/ reads os.environ on its own.
#
# .env FILES:
#   Entry points call dotenv.load_dotenv() before load_config(), so values in
#   a local .env file show up here like any other environment variable.
#
# SOFT VALIDATION:
#   Missing settings are reported (missing_settings()) but never fatal.  A
#   server started without credentials still answers tools/list; its tool
#   calls fail at the WHMCS layer and come back as error envelopes.
# =============================================================================

import os
from dataclasses import dataclass, field
from typing import Mapping, Optional

# Field name -> environment variable
ENV_VARS: dict[str, str] = {
    "url": "WHMCS_URL",
    "identifier": "WHMCS_IDENTIFIER",
    "secret": "WHMCS_SECRET",
    "accesskey": "WHMCS_ACCESS_KEY",
}


@dataclass(frozen=True)
class WHMCSConfig:
    """Where the WHMCS API lives and how to authenticate against it."""

    url: str = ""                      # Base URL, e.g. "https://billing.example.com"
    identifier: str = ""               # API credential identifier
    secret: str = field(default="", repr=False)
    accesskey: str = field(default="", repr=False)

    def missing_settings(self) -> list[str]:
        """Environment variable names whose value is empty."""
        return [env for name, env in ENV_VARS.items() if not getattr(self, name)]


def load_config(environ: Optional[Mapping[str, str]] = None) -> WHMCSConfig:
    """Build a WHMCSConfig from `environ` (defaults to os.environ)."""
    if environ is None:
        environ = os.environ
    return WHMCSConfig(**{name: environ.get(env, "") for name, env in ENV_VARS.items()})
