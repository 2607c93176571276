"""Command line entry point: label a pull request from its /kind and release-note lines."""

from __future__ import annotations

import argparse
import json
import os
import sys
from collections.abc import Sequence

from .ghclient import GitHubClient, GitHubError
from .labeler import Labeler, LabelerError

PROG = "pr-kind-labeler"
DESCRIPTION = "Sync /kind commands in PR body to GitHub labels and enforce changelog notes"


class CommandError(Exception):
    """Raised when the command cannot run with the input it was given."""


def parse_pr_reference(value: str) -> tuple[str, str, int]:
    """Split an ``owner/repo/number`` reference into its parts."""
    parts = value.split("/")
    if len(parts) != 3:
        raise ValueError("invalid PR format, expected owner/repo/PR")
    owner, repo, number = parts
    try:
        pr_num = int(number)
    except ValueError as exc:
        raise ValueError(f"invalid PR number: {exc}") from exc
    return owner, repo, pr_num


def manual_test(client: GitHubClient, owner: str, repo: str, pr_num: int) -> None:
    """Fetch a pull request body and check it without changing any labels."""
    try:
        body = client.get_pull_request_body(owner, repo, pr_num)
    except GitHubError as exc:
        raise GitHubError(f"failed to get PR body: {exc}", exc.status) from exc
    Labeler(client, owner, repo, pr_num).process_pr(body, False)


def _mapping(value: object) -> dict:
    return value if isinstance(value, dict) else {}


def _run_from_event(client: GitHubClient) -> None:
    event_path = os.environ.get("GITHUB_EVENT_PATH", "")
    try:
        with open(event_path, "rb") as handle:
            payload = handle.read()
    except OSError as exc:
        raise CommandError(f"failed to read event path: {exc}") from exc
    try:
        event = _mapping(json.loads(payload))
    except ValueError as exc:
        raise CommandError(f"failed to parse event JSON: {exc}") from exc

    repository = _mapping(event.get("repository"))
    owner = _mapping(repository.get("owner")).get("login") or ""
    repo = repository.get("name") or ""
    pr_num = event.get("number") or 0
    body = _mapping(event.get("pull_request")).get("body") or ""

    Labeler(client, owner, repo, pr_num).process_pr(body, True)


def _run(token: str) -> None:
    if not token:
        raise CommandError("input token is not set")
    client = GitHubClient(token)

    reference = os.environ.get("GHPR", "")
    if reference:
        # e.g. GHPR=owner/repo/123 to check a pull request by hand
        try:
            owner, repo, pr_num = parse_pr_reference(reference)
        except ValueError as exc:
            raise CommandError(str(exc)) from exc
        manual_test(client, owner, repo, pr_num)
        return

    _run_from_event(client)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the command; return 0 on success and 1 on any failure."""
    parser = argparse.ArgumentParser(prog=PROG, description=DESCRIPTION)
    parser.add_argument("token", help="GitHub API token")
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        return 0 if exc.code in (0, None) else 1

    try:
        _run(args.token)
    except (CommandError, LabelerError, GitHubError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())