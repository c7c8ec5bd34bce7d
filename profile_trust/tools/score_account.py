#!/usr/bin/env python3
"""
Score one account snapshot from a JSON file and print the derived values.

Input: JSON object in Account.to_dict() layout (account_id required; every
other field optional).

Output: JSON with profile_completeness, account_age_days,
credibility_score, behavior_index.

Usage:
  py -m profile_trust.tools.score_account account.json [--now 1760000000]
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from profile_trust.scoring import Account, ScoringOrchestrator
from profile_trust.trust_logging import get_logger

logger = get_logger(__name__)


def score_file(path: Path, now_ts: int | None = None) -> dict:
    with open(path, encoding="utf-8") as f:
        data = json.load(f)
    account = ScoringOrchestrator().refresh(Account.from_dict(data), now_ts)
    return {
        "account_id": account.account_id,
        "profile_completeness": account.profile_completeness,
        "account_age_days": account.account_age_days,
        "credibility_score": account.credibility_score,
        "behavior_index": account.behavior_index,
    }


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(description="Compute trust scores for an account JSON snapshot")
    ap.add_argument("path", type=Path, help="Account JSON file")
    ap.add_argument("--now", type=int, default=None, help="Unix time to score at (default: now)")
    args = ap.parse_args(argv)

    if not args.path.exists():
        logger.error("score_account_missing_file", path=str(args.path))
        print(f"[score_account] file not found: {args.path}", file=sys.stderr)
        return 1
    try:
        result = score_file(args.path, args.now)
    except (json.JSONDecodeError, KeyError, TypeError, ValueError) as e:
        logger.error("score_account_bad_input", path=str(args.path), error=str(e))
        print(f"[score_account] invalid account JSON: {e}", file=sys.stderr)
        return 1
    print(json.dumps(result, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
