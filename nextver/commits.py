"""Conventional Commits parsing.

Header: ``type(scope)!: subject``. A ``!`` before the colon or a
``BREAKING CHANGE:`` / ``BREAKING-CHANGE:`` footer marks the commit as breaking.
Headers that do not follow the convention still parse, with an empty type.
"""
import re

from pydantic import BaseModel

HEADER_RE = re.compile(r"^(\w*)(?:\((.*)\))?!?: (.*)$")
BREAKING_HEADER_RE = re.compile(r"^(\w*)(?:\((.*)\))?!: (.*)$")
NOTE_RE = re.compile(r"^[\s|*]*(BREAKING CHANGE|BREAKING-CHANGE)[:\s]+(.*)", re.IGNORECASE)
REVERT_RE = re.compile(
    r'^(?:Revert|revert:)\s"?([\s\S]+?)"?\s*This reverts commit (\w*)\.', re.IGNORECASE
)


class Revert(BaseModel):
    header: str
    hash: str


class Commit(BaseModel):
    hash: str = ""
    header: str = ""
    type: str | None = None
    scope: str | None = None
    subject: str | None = None
    body: str = ""
    notes: list[str] = []
    revert: Revert | None = None

    @property
    def breaking(self) -> bool:
        return bool(self.notes)


def parse_commit(message: str, commit_hash: str = "") -> Commit:
    message = message.strip()
    header, _, body = message.partition("\n")
    header = header.strip()
    body = body.strip()

    commit = Commit(hash=commit_hash, header=header, body=body)
    m = HEADER_RE.match(header)
    if m:
        commit.type, commit.scope, commit.subject = m.group(1) or None, m.group(2), m.group(3)

    for line in body.splitlines():
        note = NOTE_RE.match(line)
        if note:
            commit.notes.append(note.group(2).strip())

    # "type!: subject" counts as a breaking note unless a footer already says so
    bang = BREAKING_HEADER_RE.match(header)
    if bang and not commit.notes:
        commit.notes.append(bang.group(3))

    rv = REVERT_RE.match(message)
    if rv:
        commit.revert = Revert(header=rv.group(1).strip(), hash=rv.group(2))
    return commit


def _reverts(revert: Revert, target: Commit) -> bool:
    if revert.hash and target.hash and target.hash.startswith(revert.hash):
        return True
    return not revert.hash and revert.header == target.header


def filter_reverted(commits: list[Commit]) -> list[Commit]:
    """Drop revert commits together with the commits they revert.

    A revert whose target is outside ``commits`` is kept as an ordinary commit.
    """
    dropped: set[int] = set()
    for i, commit in enumerate(commits):
        if commit.revert is None or i in dropped:
            continue
        for j, target in enumerate(commits):
            if j != i and j not in dropped and _reverts(commit.revert, target):
                dropped.update((i, j))
                break
    return [c for i, c in enumerate(commits) if i not in dropped]
