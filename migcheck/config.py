from __future__ import annotations

"""
Checker configuration: which engine to run, which rule pack to apply and where
the transient database lives.

Nothing here is user-tunable yet; the CLI only exposes the source directory
and the optional build command. Keeping the engine details in one place lets
tests point the session at a different executable or rule pack.
"""

from dataclasses import dataclass


DEFAULT_ENGINE = "codeql"
DEFAULT_LANGUAGE = "go"
DEFAULT_RULE_PACK = "skip-mev/cosmos-52-ql"


@dataclass(frozen=True)
class Config:
    """
    Engine settings for one check session.

    engine: executable name or path of the analysis engine.
    language: language passed to `database create`.
    rule_pack: query pack identifier passed to `database analyze`.
    sarif_format: value of the analyze step's --format flag.
    results_filename: report file name, created inside the database directory.
    workspace_prefix: prefix of the temporary database directory.
    """

    engine: str = DEFAULT_ENGINE
    language: str = DEFAULT_LANGUAGE
    rule_pack: str = DEFAULT_RULE_PACK
    sarif_format: str = "sarif-latest"
    results_filename: str = "results.json"
    workspace_prefix: str = "cosmos-migration-db"


def get_default_config() -> Config:
    """Return the configuration the CLI uses."""
    return Config()
