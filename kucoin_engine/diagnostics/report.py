"""
Diagnostics Report — Formats and displays suite results.
"""

from datetime import datetime, timezone


def print_banner():
    print()
    print("  ╔═══════════════════════════════════════════════╗")
    print("  ║     K U C O I N   E N G I N E                 ║")
    print("  ║        Live Diagnostics                        ║")
    print("  ╚═══════════════════════════════════════════════╝")
    print()


def print_section(title: str):
    padding = max(0, 48 - len(title))
    print(f"\n  ── {title} {'─' * padding}")


def print_result(result: dict):
    icon = "✅" if result["passed"] else "❌"
    print(f"    {icon} {result['name']}")
    detail = result.get("detail", "")
    if detail:
        print(f"        → {detail}")


def group_by_suite(all_results: list[dict]) -> dict[str, list[dict]]:
    """Results are named "<Suite>: <check>"; group on the prefix."""
    suites: dict[str, list[dict]] = {}
    for r in all_results:
        prefix = r["name"].split(":")[0].strip()
        suites.setdefault(prefix, []).append(r)
    return suites


def print_verdict(all_results: list[dict], elapsed: float) -> bool:
    """Print per-suite tallies and the overall verdict. True when nothing failed."""
    total = len(all_results)
    passed = sum(1 for r in all_results if r["passed"])
    failed = total - passed

    print()
    print("  ══ Verdict ════════════════════════════════════════")
    print()

    for suite_name, results in group_by_suite(all_results).items():
        suite_passed = sum(1 for r in results if r["passed"])
        icon = "✅" if suite_passed == len(results) else "❌"
        print(f"    {icon} {suite_name}: {suite_passed}/{len(results)}")

    print()
    print(f"    Total: {passed}/{total} passed ({failed} failed)")
    print(f"    Time:  {elapsed:.1f}s")
    print(f"    Run:   {datetime.now(timezone.utc).strftime('%Y-%m-%d %H:%M:%S')} UTC")
    print()

    if total == 0:
        print("  ⚪ NOTHING RAN — check credentials or suite names")
    elif failed == 0:
        print("  🟢 ALL DIAGNOSTICS PASSED")
    else:
        print("  🔴 DIAGNOSTICS FAILED — Review errors above")
        for r in all_results:
            if not r["passed"]:
                print(f"      • {r['name']}")

    print()
    return total > 0 and failed == 0


def format_json_report(all_results: list[dict], elapsed: float) -> dict:
    """Return results as a structured dict (for programmatic use)."""
    total = len(all_results)
    passed = sum(1 for r in all_results if r["passed"])

    return {
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "elapsed_seconds": round(elapsed, 2),
        "total": total,
        "passed": passed,
        "failed": total - passed,
        "all_passed": total > 0 and passed == total,
        "suites": {
            name: {"passed": sum(1 for r in rs if r["passed"]), "total": len(rs)}
            for name, rs in group_by_suite(all_results).items()
        },
        "results": all_results,
    }
