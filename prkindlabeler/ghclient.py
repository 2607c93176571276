"""A small client for the parts of the GitHub REST API the labeler needs."""

from __future__ import annotations

from urllib.parse import quote

import requests

DEFAULT_API_URL = "https://api.github.com"
_TIMEOUT = 30


class GitHubError(Exception):
    """Raised when a GitHub API request fails."""

    def __init__(self, message: str, status: int | None = None) -> None:
        super().__init__(message)
        self.status = status


def _segment(value: object) -> str:
    return quote(str(value), safe="")


class GitHubClient:
    """Issues and pull-request calls against the GitHub REST API."""

    def __init__(
        self,
        token: str | None,
        base_url: str = DEFAULT_API_URL,
        session: requests.Session | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session if session is not None else requests.Session()
        self._headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": "2022-11-28",
        }
        if token:
            self._headers["Authorization"] = f"Bearer {token}"

    def _request(self, method: str, path: str, **kwargs) -> requests.Response:
        url = self.base_url + path
        try:
            response = self.session.request(
                method, url, headers=self._headers, timeout=_TIMEOUT, **kwargs
            )
        except requests.RequestException as exc:
            raise GitHubError(f"{method} {url}: {exc}") from exc
        if not 200 <= response.status_code < 300:
            try:
                payload = response.json()
                message = payload.get("message", "") if isinstance(payload, dict) else ""
            except ValueError:
                message = response.text
            raise GitHubError(
                f"{method} {url}: {response.status_code} {message}".rstrip(),
                response.status_code,
            )
        return response

    def _labels_path(self, owner: str, repo: str, number: int) -> str:
        return f"/repos/{_segment(owner)}/{_segment(repo)}/issues/{_segment(number)}/labels"

    @staticmethod
    def _names(response: requests.Response) -> list[str]:
        if not response.content:
            return []
        return [item.get("name", "") for item in response.json()]

    def list_issue_labels(self, owner: str, repo: str, number: int) -> list[str]:
        """Return the names of the labels on an issue or pull request."""
        response = self._request("GET", self._labels_path(owner, repo, number))
        return self._names(response)

    def add_issue_labels(
        self, owner: str, repo: str, number: int, labels: list[str]
    ) -> list[str]:
        """Add labels to an issue and return the labels it then carries."""
        response = self._request(
            "POST", self._labels_path(owner, repo, number), json=list(labels)
        )
        return self._names(response)

    def remove_issue_label(self, owner: str, repo: str, number: int, label: str) -> None:
        """Remove one label from an issue."""
        path = f"{self._labels_path(owner, repo, number)}/{_segment(label)}"
        self._request("DELETE", path)

    def get_pull_request_body(self, owner: str, repo: str, number: int) -> str:
        """Return the description of a pull request, or an empty string."""
        path = f"/repos/{_segment(owner)}/{_segment(repo)}/pulls/{_segment(number)}"
        response = self._request("GET", path)
        return response.json().get("body") or ""