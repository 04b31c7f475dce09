"""Module entry point for `python -m graphql_semver_bump`."""

from .cli import main

if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
