#!/usr/bin/env python
"""Print the next semantic version for this repository.

Reads ../VERSION and bumps it according to the Conventional Commits found
since the last release tag. Prints the unchanged version when there is
nothing to release. Exit status 1 on any failure, with the reason on stderr.
Runs from a checkout without installing the package.
"""
import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nextver.cli import main  # noqa: E402

if __name__ == '__main__':
    raise SystemExit(main(ROOT))
