#!/usr/bin/env python3
"""Fail a CI job from a saved ``POST /api/lint`` response."""
import argparse, json, sys


def load_json(path, default):
    try:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)
    except (OSError, json.JSONDecodeError):
        return default


def count(report, severity):
    n = 0
    for run in report.get("runs", []) or []:
        result = run.get("result") or {}
        n += len(result.get(severity) or [])
    return n


def not_run(report):
    return [r.get("linter") for r in report.get("runs", []) or [] if r.get("status") != "ok"]


def evaluate(report, max_errors=0, max_warnings=-1):
    errors = count(report, "error")
    warnings = count(report, "warning")
    broken = not_run(report)

    print(f"[gate] errors={errors} (max {max_errors})")
    print(f"[gate] warnings={warnings} (max {'unlimited' if max_warnings < 0 else max_warnings})")
    if broken:
        print(f"[gate] linters that did not run: {', '.join(broken)}")

    return (errors > max_errors) or (0 <= max_warnings < warnings) or bool(broken)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--report", required=True)
    ap.add_argument("--max_errors", type=int, default=0)
    ap.add_argument("--max_warnings", type=int, default=-1)
    args = ap.parse_args()

    report = load_json(args.report, None)
    if report is None:
        print(f"[gate] cannot read report {args.report}")
        sys.exit(2)

    if evaluate(report, args.max_errors, args.max_warnings):
        print("[gate] FAILED")
        sys.exit(1)
    print("[gate] PASSED")
    sys.exit(0)


if __name__ == "__main__":
    main()
