"""Issue a local development access token signed with SUPABASE_JWT_SECRET."""
import argparse
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from wordblog.config import settings
from wordblog.services.auth_service import create_access_token


def main():
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("user_id", help="identity service user id (uuid)")
    parser.add_argument("--email", default=None)
    args = parser.parse_args()
    print(create_access_token(settings, args.user_id, args.email))


if __name__ == "__main__":
    main()
