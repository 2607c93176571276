"""Sync /kind commands in a pull request body to labels and check release notes."""

from __future__ import annotations

import re
from collections.abc import Iterable

from . import kinds
from .ghclient import GitHubError
from .labels import (
    DEPRECATED_RELEASE_NOTE_LABEL,
    INVALID_KIND_LABEL,
    INVALID_RELEASE_NOTE_LABEL,
    KIND_PREFIX,
    RELEASE_NOTE_LABEL,
    RELEASE_NOTE_NONE_LABEL,
    kind_label,
)

_WS = r"[\t\n\f\r ]"
_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_KIND_RE = re.compile(rf"^/kind{_WS}+([a-z0-9_/-]+)", re.IGNORECASE | re.MULTILINE)
_RELEASE_NOTE_RE = re.compile(rf"```release-note{_WS}*(.*?){_WS}*```", re.DOTALL)

_MISSING_BLOCK = (
    "missing or empty ```release-note``` block; please add your line. "
    "If no release notes, add:\n```release-note\nNONE\n```"
)
_EMPTY_BLOCK = "missing or empty ```release-note``` block; please add your line or 'NONE'"


class LabelerError(Exception):
    """Raised when a pull request fails validation or its labels cannot be synced."""

    def __init__(self, message: str, errors: Iterable[Exception] = ()) -> None:
        super().__init__(message)
        self.errors = tuple(errors)

    @classmethod
    def combine(cls, errors: list[Exception]) -> LabelerError:
        """Build one error out of several, one per line."""
        if len(errors) == 1:
            message = str(errors[0])
        else:
            message = "".join(f"\n- {error}" for error in errors)
        return cls(message, errors)


def strip_comments(body: str) -> str:
    """Remove HTML comments so examples inside them are not parsed."""
    return _COMMENT_RE.sub("", body)


def extract_kinds(body: str) -> list[str]:
    """Return the kinds named by /kind lines, deprecated ones replaced, without repeats."""
    found = dict.fromkeys(kinds.normalize_kind(m.group(1)) for m in _KIND_RE.finditer(body))
    return list(found)


def _supported_list() -> str:
    return "[" + " ".join(kinds.SUPPORTED_KINDS) + "]"


def _quoted_list(items: list[str]) -> str:
    return "[" + " ".join(f'"{item}"' for item in items) + "]"


class Labeler:
    """Works out and applies the label changes a pull request body calls for."""

    def __init__(self, client, owner: str, repo: str, pr_num: int) -> None:
        self.client = client
        self.owner = owner
        self.repo = repo
        self.pr_num = pr_num
        self.labels_to_add: set[str] = set()
        self.labels_to_remove: set[str] = set()
        self.current_labels: set[str] = set()

    def process_pr(self, body: str, sync_labels: bool = True) -> None:
        """Check the body, plan label changes and, if asked, apply them."""
        self._fetch_labels()
        sanitized = strip_comments(body)

        errors: list[Exception] = []
        for step in (self._process_kind_labels, self._process_release_notes):
            try:
                step(sanitized)
            except LabelerError as exc:
                errors.append(exc)
        if sync_labels:
            try:
                self._sync_labels()
            except LabelerError as exc:
                errors.append(exc)
        if errors:
            raise LabelerError.combine(errors)

    def _want(self, label: str) -> None:
        if label not in self.current_labels:
            self.labels_to_add.add(label)

    def _drop(self, label: str) -> None:
        if label in self.current_labels:
            self.labels_to_remove.add(label)

    def _fetch_labels(self) -> None:
        try:
            current = self.client.list_issue_labels(self.owner, self.repo, self.pr_num)
        except GitHubError as exc:
            raise GitHubError(f"failed to list labels: {exc}", exc.status) from exc
        self.current_labels = set(current)

    def _process_kind_labels(self, body: str) -> None:
        extracted = extract_kinds(body)
        self._verify_kinds(extracted)
        self._sync_kind_labels(extracted)

    def _verify_kinds(self, extracted: list[str]) -> None:
        if not extracted:
            self._want(INVALID_KIND_LABEL)
            raise LabelerError(
                f'no /kind labels found, labeling "{INVALID_KIND_LABEL}". '
                f"supported kinds: {_supported_list()}"
            )
        for kind in extracted:
            if kinds.is_supported(kind):
                continue
            self._want(INVALID_KIND_LABEL)
            raise LabelerError(
                f'invalid /kind "{kind}" detected, labeling "{INVALID_KIND_LABEL}". '
                f"supported kinds: {_supported_list()}"
            )
        self._drop(INVALID_KIND_LABEL)

    def _sync_kind_labels(self, extracted: list[str]) -> None:
        for kind in extracted:
            self._want(kind_label(kind))

        wanted = set(extracted)
        for label in self.current_labels:
            if not label.startswith(KIND_PREFIX):
                continue
            current_kind = label.removeprefix(KIND_PREFIX)
            successor = kinds.DEPRECATED_KIND_MAP.get(current_kind)
            if successor is not None and successor in wanted:
                self.labels_to_remove.add(label)
                continue
            if current_kind not in wanted:
                self.labels_to_remove.add(label)

    def _process_release_notes(self, body: str) -> None:
        self._drop(DEPRECATED_RELEASE_NOTE_LABEL)

        match = _RELEASE_NOTE_RE.search(body)
        if match is None:
            self._want(INVALID_RELEASE_NOTE_LABEL)
            self._drop(RELEASE_NOTE_LABEL)
            self._drop(RELEASE_NOTE_NONE_LABEL)
            raise LabelerError(_MISSING_BLOCK)

        entry = match.group(1).strip()
        if not entry:
            self._want(INVALID_RELEASE_NOTE_LABEL)
            self._drop(RELEASE_NOTE_LABEL)
            self._drop(RELEASE_NOTE_NONE_LABEL)
            raise LabelerError(_EMPTY_BLOCK)
        if entry.casefold() == "none":
            self._want(RELEASE_NOTE_NONE_LABEL)
            self._drop(INVALID_RELEASE_NOTE_LABEL)
            self._drop(RELEASE_NOTE_LABEL)
        else:
            self._want(RELEASE_NOTE_LABEL)
            self._drop(INVALID_RELEASE_NOTE_LABEL)
            self._drop(RELEASE_NOTE_NONE_LABEL)

    def _sync_labels(self) -> None:
        failures: list[Exception] = []
        to_add = sorted(self.labels_to_add)
        try:
            self.client.add_issue_labels(self.owner, self.repo, self.pr_num, to_add)
        except GitHubError as exc:
            failures.append(
                GitHubError(f"failed to add labels {_quoted_list(to_add)}: {exc}", exc.status)
            )

        for label in sorted(self.labels_to_remove):
            try:
                self.client.remove_issue_label(self.owner, self.repo, self.pr_num, label)
            except GitHubError as exc:
                failures.append(
                    GitHubError(f'failed to remove label "{label}": {exc}', exc.status)
                )

        if failures:
            raise LabelerError("\n".join(str(f) for f in failures), failures)