"""Regular expressions for the credential scraping of the backends."""

from __future__ import annotations

import re
from re import Pattern
from typing import Final

__all__: list[str] = ["BING_CREDENTIALS_PATTERN", "JWT_PATTERN"]

# Bing translator page: key (Unix milliseconds) and token of the abuse prevention helper
# Example: 'var params_AbusePreventionHelper = [1700000000000,"t0k3n",3600000];'
BING_CREDENTIALS_PATTERN: Final[Pattern[str]] = re.compile(
    r"""
    var\s+params_AbusePreventionHelper\s*=\s*\[
    (?P<key>[^,\]]*),
    "(?P<token>[^"]*)"
""",
    re.VERBOSE,
)

# JSON Web Token: the payload is everything between the first and the last dot
JWT_PATTERN: Final[Pattern[str]] = re.compile(r"^[^.]+\.(?P<payload>.+)\.[^.]*$")
