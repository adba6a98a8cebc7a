"""
Diagnostics Runner — Orchestrates live suites against the KuCoin API and produces a report.

Usage:
    python -m kucoin_engine.diagnostics.runner              # Run all suites
    python -m kucoin_engine.diagnostics.runner time auth    # Run specific suites
    python -m kucoin_engine.diagnostics.runner --list       # List available suites
    python -m kucoin_engine.diagnostics.runner --json       # Also dump a JSON report
"""

import sys
import time
import importlib
import orjson as json

from ..config import load_credentials, validate_credentials, print_config
from .report import print_banner, print_section, print_result, print_verdict, format_json_report

# ── Available Suites ─────────────────────────────────────────────────────────

SUITE_MAP = {
    "time": ("Server Time", "kucoin_engine.diagnostics.suites.test_time"),
    "auth": ("Authentication", "kucoin_engine.diagnostics.suites.test_auth"),
    "account": ("Account", "kucoin_engine.diagnostics.suites.test_account"),
    "ledger": ("Ledger Pagination", "kucoin_engine.diagnostics.suites.test_ledger"),
}

# Default run order
DEFAULT_ORDER = ["time", "auth", "account", "ledger"]

AUTH_SUITES = {"auth", "account", "ledger"}


def build_config() -> dict:
    """Build the config dict passed to each suite."""
    creds = load_credentials()
    return {
        "rest_base": creds.base_url,
        "creds": creds,
    }


def run_suite(suite_key: str, config: dict) -> list[dict]:
    """Dynamically import and run a test suite."""
    if suite_key not in SUITE_MAP:
        return [{"name": f"Unknown suite: {suite_key}", "passed": False, "detail": "Not found"}]

    label, module_path = SUITE_MAP[suite_key]
    print_section(label)

    try:
        module = importlib.import_module(module_path)
        results = module.run(config)

        for r in results:
            print_result(r)

        return results

    except Exception as e:
        result = {"name": f"{label}: Import/Run Error", "passed": False, "detail": str(e)}
        print_result(result)
        return [result]


def main():
    args = sys.argv[1:]

    # --list flag
    if "--list" in args:
        print("\nAvailable diagnostic suites:")
        for key, (label, _) in SUITE_MAP.items():
            print(f"  {key:<12} {label}")
        print()
        return

    want_json = "--json" in args
    args = [a for a in args if not a.startswith("--")]

    # Banner + config
    print_banner()
    config = build_config()
    has_creds = validate_credentials(config["creds"])
    print_config(config["creds"])

    # Determine which suites to run
    if args:
        suites_to_run = [s for s in args if s in SUITE_MAP]
        unknown = [s for s in args if s not in SUITE_MAP]
        if unknown:
            print(f"  ⚠ Unknown suites: {', '.join(unknown)}")
    else:
        suites_to_run = DEFAULT_ORDER

    # Skip auth-required suites if no credentials
    if not has_creds:
        skipped = [s for s in suites_to_run if s in AUTH_SUITES]
        if skipped:
            print(f"  ⚠ Skipping auth-required suites (no credentials): {', '.join(skipped)}")
        suites_to_run = [s for s in suites_to_run if s not in AUTH_SUITES]

    # Run
    all_results = []
    start = time.time()

    for suite_key in suites_to_run:
        results = run_suite(suite_key, config)
        all_results.extend(results)

    elapsed = time.time() - start

    # Verdict
    all_passed = print_verdict(all_results, elapsed)
    if want_json:
        print(json.dumps(format_json_report(all_results, elapsed), option=json.OPT_INDENT_2).decode("utf-8"))
    sys.exit(0 if all_passed else 1)


if __name__ == "__main__":
    main()
