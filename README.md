# prkindlabeler

Keeps a pull request's labels in step with what its description says.

The tool reads the pull request body and:

- collects every `/kind <name>` line (case-insensitive, at the start of a line)
  and sets matching `kind/<name>` labels, removing `kind/` labels that are no
  longer asked for;
- labels the pull request `do-not-merge/kind-invalid` when no kind is given or
  an unknown kind is used, and removes that label once the kinds are valid;
- checks for a fenced release-note block:

  ````
  ```release-note
  Describe the change here
  ```
  ````

  and sets `release-note`, `release-note-none` (when the block says `NONE`,
  in any case) or `do-not-merge/release-note-invalid` (when the block is
  missing or empty), removing whichever of the others is present.

A leftover `release-note-needed` label is always removed.

HTML comments (`<!-- ... -->`) in the body are ignored, so templates can hold
examples without them being picked up.

Supported kinds: `design`, `deprecation`, `feature`, `fix`, `breaking_change`,
`documentation`, `cleanup`, `flake`, `install`, `bump`. The older kinds
`new_feature` and `bug_fix` are accepted and mapped to `feature` and `fix`;
existing `kind/new_feature` and `kind/bug_fix` labels are replaced.

## Installation

```
pip install prkindlabeler
```

## Usage

In a GitHub Actions workflow triggered by `pull_request` events, pass a token
as the only argument:

```
pr-kind-labeler "$GITHUB_TOKEN"
```

The event is read from the file named by `GITHUB_EVENT_PATH`. Labels are added
and removed first; the command then exits with status 1 and prints the
problems to standard error when the kind or release note is invalid, or when a
GitHub request fails.

To check a pull request by hand without changing its labels, set `GHPR` to
`owner/repo/number`:

```
GHPR=octo-org/octo-repo/123 pr-kind-labeler "$GITHUB_TOKEN"
```

## Use from Python

```python
from prkindlabeler.ghclient import GitHubClient
from prkindlabeler.labeler import Labeler, LabelerError

client = GitHubClient("token")
labeler = Labeler(client, "octo-org", "octo-repo", 123)
try:
    labeler.process_pr(body, sync_labels=True)
except LabelerError as exc:
    print(exc)
```

`GitHubClient` takes an optional `base_url` (default
`https://api.github.com`) and an optional `requests.Session`. Failed API calls
raise `prkindlabeler.ghclient.GitHubError`, which carries the HTTP status in
`status`. The helpers `extract_kinds` and `strip_comments` in
`prkindlabeler.labeler` can be used on their own to inspect a body.

## Limits

The command always talks to `https://api.github.com`; another API address can
only be used from Python, through `GitHubClient(base_url=...)`.

## Running the tests

```
pip install -e .[test]
pytest
```