#!/usr/bin/env python3
"""
Print a bearer token for a client id.

Usage: from project root, with the package installed:
  python scripts/issue_token.py 7
  python scripts/issue_token.py 7 --minutes 5

The token is signed with MYBUDGET_JWT_SECRET, so a server started with
the same environment accepts it.
"""
import argparse
import sys
from datetime import timedelta

from mybudget.api.deps import get_token_authority


def main() -> int:
    parser = argparse.ArgumentParser(description="Issue a bearer token for a client id.")
    parser.add_argument("client_id", type=int, help="Client id written into the sub claim")
    parser.add_argument("--minutes", type=int, default=None, help="Token lifetime in minutes")
    args = parser.parse_args()

    authority = get_token_authority()
    lifetime = timedelta(minutes=args.minutes) if args.minutes is not None else None
    token = authority.create_token(str(args.client_id), expires_delta=lifetime)
    print(f"{authority.header_name}: Bearer {token}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
