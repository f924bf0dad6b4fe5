"""
Create a user directly in the database (e.g. the first Admin). Run from project root:
  python -m musica_api.scripts.create_user USERNAME PASSWORD [role]
Example:
  python -m musica_api.scripts.create_user admin your-secure-password Admin
"""
import argparse
import logging
import sys

from musica_api.core.database import get_sessionmaker
from musica_api.core.errors import ServiceError
from musica_api.models.user import Role
from musica_api.repositories.users import UserRepository
from musica_api.schemas.auth import PASSWORD_MAX_LEN, USERNAME_MAX_LEN

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s %(levelname)s %(name)s %(message)s",
    datefmt="%Y-%m-%dT%H:%M:%SZ",
)
logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Create a Musica API user.")
    parser.add_argument("username", help=f"Username (1-{USERNAME_MAX_LEN} chars)")
    parser.add_argument("password", help=f"Password (1-{PASSWORD_MAX_LEN} chars)")
    parser.add_argument(
        "role",
        nargs="?",
        default=Role.STANDARD.value,
        choices=[r.value for r in Role],
    )
    args = parser.parse_args(argv)

    username = args.username.strip()
    if not username or len(username) > USERNAME_MAX_LEN:
        print("Invalid username length.", file=sys.stderr)
        return 1
    if not args.password or len(args.password) > PASSWORD_MAX_LEN:
        print(f"Password must be 1-{PASSWORD_MAX_LEN} characters.", file=sys.stderr)
        return 1

    db = get_sessionmaker()()
    try:
        UserRepository(db).create(
            username=username,
            password=args.password,
            role=Role(args.role),
        )
    except ServiceError as e:
        print(f"Could not create user '{username}': {e.message}", file=sys.stderr)
        return 1
    finally:
        db.close()
    logger.info("Created user '%s' with role '%s'.", username, args.role)
    return 0


if __name__ == "__main__":
    sys.exit(main())
