"""Bookstore management CLI.

Creates and drops the database schema and seeds the first administrator.

Usage:
    python src/manage.py setup-db
    python src/manage.py drop-db
    python src/manage.py seed-admin --name "Site Admin" --email admin@example.com
"""

import argparse
import getpass
import sys


def _init_domain():
    from bookstore.domain import bookstore

    bookstore.init()
    return bookstore


def setup_database():
    """Create tables for every aggregate and entity."""
    from bookstore.utils.db import setup_db

    domain = _init_domain()
    print("Creating bookstore database schema...")
    setup_db(domain)
    print("Done.")


def drop_database():
    """Drop every table created by `setup_database`."""
    from bookstore.utils.db import drop_db

    domain = _init_domain()
    print("Dropping bookstore database schema...")
    drop_db(domain)
    print("Done.")


def seed_admin(name, email, password):
    """Register an account and promote it to ADMIN.

    Registration never grants the ADMIN role, so the first administrator is
    created here.
    """
    from bookstore.identity.administration import UpdateUser
    from bookstore.identity.registration import RegisterUser
    from bookstore.identity.user import Role

    domain = _init_domain()
    with domain.domain_context():
        user_id = domain.process(RegisterUser(name=name, email=email, password=password), asynchronous=False)
        domain.process(UpdateUser(user_id=user_id, role=Role.ADMIN.value), asynchronous=False)

    print(f"Administrator {email} created with id {user_id}.")
    return user_id


def main():
    parser = argparse.ArgumentParser(description="Bookstore management")
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("setup-db", help="Create all database tables")
    subparsers.add_parser("drop-db", help="Drop all database tables")

    seed_parser = subparsers.add_parser("seed-admin", help="Create an administrator account")
    seed_parser.add_argument("--name", required=True)
    seed_parser.add_argument("--email", required=True)
    seed_parser.add_argument("--password", help="Prompted for when omitted")

    args = parser.parse_args()

    if args.command == "setup-db":
        setup_database()
    elif args.command == "drop-db":
        drop_database()
    elif args.command == "seed-admin":
        seed_admin(args.name, args.email, args.password or getpass.getpass("Password: "))
    else:
        parser.print_help()
        sys.exit(1)


if __name__ == "__main__":
    main()
