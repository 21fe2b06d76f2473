#------------------------------------------------------------
#                      github_service.py
#             Handles GitHub GraphQL requests and
#                      response shaping.

import sys
import threading
from typing import Dict, List, Optional
import requests
from ..config import (
    CONTRIBUTION_MIN_STARS,
    GITHUB_ACCEPT_HEADER,
    GITHUB_GRAPHQL_URL,
    GITHUB_REQUEST_TIMEOUT_SECONDS,
    GITHUB_USER_AGENT,
    GRAPHQL_PAGE_SIZE,
    OWNED_REPO_MIN_STARS,
)
from ..models import ContributionRecord, GraphQLResponse, OwnedRepoRecord, UpdateConfig
from .filter_service import is_active_repo, parse_year

CONTRIBUTIONS_QUERY = """
query($username: String!, $cursor: String) {
  user(login: $username) {
    pullRequests(first: %d, states: [MERGED], after: $cursor, orderBy: {field: CREATED_AT, direction: DESC}) {
      pageInfo {
        hasNextPage
        endCursor
      }
      nodes {
        mergedAt
        repository {
          nameWithOwner
          isPrivate
          isArchived
          stargazerCount
          pushedAt
        }
      }
    }
  }
}
""" % GRAPHQL_PAGE_SIZE

OWNED_REPOS_QUERY = """
query($username: String!) {
  user(login: $username) {
    repositories(first: %d, ownerAffiliations: OWNER, privacy: PUBLIC, orderBy: {field: STARGAZERS, direction: DESC}) {
      nodes {
        name
        url
        description
        isArchived
        stargazerCount
        pushedAt
      }
    }
  }
}
""" % GRAPHQL_PAGE_SIZE

GRAPHQL_ERROR_WARNING_TEMPLATE = "WARNING: GraphQL error ({context}): {message}"
UNEXPECTED_PAYLOAD_MESSAGE = "GraphQL response body is not a JSON object"
UNKNOWN_ERROR_MESSAGE = "unknown error"
CONTRIBUTION_PAGE_MESSAGE = "Contributions page {page}: {count} merged PRs, {kept} kept"
OWNED_REPOS_MESSAGE = "Owned repositories: {count} returned, {kept} kept"

class GitHubService:

    # This function does store runtime configuration used by API methods.
    # The cancelled event stops any fetch still paginating after a failed join.
    def __init__(self, config: UpdateConfig):
        self.config = config
        self.cancelled = threading.Event()

    # This function does build request headers for GitHub API calls.
    def headers(self) -> Dict[str, str]:
        return {
            "Accept": GITHUB_ACCEPT_HEADER,
            "Authorization": f"Bearer {self.config.github_token}",
            "User-Agent": GITHUB_USER_AGENT,
        }

    def execute_query(self, query: str, cursor: Optional[str] = None) -> GraphQLResponse:
        """
        Send one GraphQL query for the configured user and decode the envelope.

        The cursor is left out of the variables entirely when it is None.
        GraphQL level errors are returned in the envelope; only network,
        HTTP status and decoding failures raise requests.RequestException.
        """
        variables = {"username": self.config.github_username}
        if cursor is not None:
            variables["cursor"] = cursor

        response = requests.post(
            GITHUB_GRAPHQL_URL,
            headers=self.headers(),
            json={"query": query, "variables": variables},
            timeout=GITHUB_REQUEST_TIMEOUT_SECONDS,
        )
        response.raise_for_status()
        payload = response.json()
        if not isinstance(payload, dict):
            raise requests.exceptions.InvalidJSONError(UNEXPECTED_PAYLOAD_MESSAGE, response=response)

        errors = [
            (item.get("message") if isinstance(item, dict) else None) or UNKNOWN_ERROR_MESSAGE
            for item in payload.get("errors") or []
        ]
        data = payload.get("data")
        return GraphQLResponse(data=data if isinstance(data, dict) else None, errors=errors)

    # This function does fetch every merged PR of the user, page by page.
    # It keeps records whose target repository passes the filter policy.
    def fetch_contributions(self, cutoff_year: int) -> List[ContributionRecord]:
        records: List[ContributionRecord] = []
        cursor: Optional[str] = None
        page = 1

        while not self.cancelled.is_set():
            envelope = self.execute_query(CONTRIBUTIONS_QUERY, cursor)
            _warn_errors(envelope.errors, "contributions")

            user = _user_from(envelope)
            if user is None:
                break

            pull_requests = user.get("pullRequests") or {}
            nodes = pull_requests.get("nodes") or []
            kept = 0
            for node in nodes:
                record = _contribution_from_node(node)
                if record is None:
                    continue
                if is_active_repo(
                    record.is_private,
                    record.is_archived,
                    record.stars,
                    parse_year(record.pushed_at),
                    cutoff_year,
                    CONTRIBUTION_MIN_STARS,
                ):
                    records.append(record)
                    kept += 1

            print(CONTRIBUTION_PAGE_MESSAGE.format(page=page, count=len(nodes), kept=kept))

            page_info = pull_requests.get("pageInfo") or {}
            cursor = page_info.get("endCursor")
            # A next page without a cursor would repeat the first page forever.
            if not page_info.get("hasNextPage") or not cursor:
                break
            page += 1

        return records

    # This function does fetch the user's top public repositories in one request.
    # Repositories beyond the first page are not requested.
    def fetch_owned_repos(self, cutoff_year: int) -> List[OwnedRepoRecord]:
        if self.cancelled.is_set():
            return []
        envelope = self.execute_query(OWNED_REPOS_QUERY)
        _warn_errors(envelope.errors, "owned repositories")

        user = _user_from(envelope)
        if user is None:
            return []

        nodes = (user.get("repositories") or {}).get("nodes") or []
        repos: List[OwnedRepoRecord] = []
        for node in nodes:
            if not node:
                continue
            repo = OwnedRepoRecord(
                name=node.get("name") or "",
                url=node.get("url") or "",
                description=node.get("description"),
                is_archived=bool(node.get("isArchived")),
                stars=int(node.get("stargazerCount") or 0),
                pushed_at=node.get("pushedAt"),
            )
            if is_active_repo(
                repo.is_private,
                repo.is_archived,
                repo.stars,
                parse_year(repo.pushed_at),
                cutoff_year,
                OWNED_REPO_MIN_STARS,
            ):
                repos.append(repo)

        print(OWNED_REPOS_MESSAGE.format(count=len(nodes), kept=len(repos)))
        return repos

def _warn_errors(errors: List[str], context: str) -> None:
    for message in errors:
        print(GRAPHQL_ERROR_WARNING_TEMPLATE.format(context=context, message=message), file=sys.stderr)

# A missing data payload or user means the account is unknown or out of scope.
def _user_from(envelope: GraphQLResponse) -> Optional[dict]:
    if envelope.data is None:
        return None
    user = envelope.data.get("user")
    return user if isinstance(user, dict) else None

def _contribution_from_node(node: Optional[dict]) -> Optional[ContributionRecord]:
    repository = (node or {}).get("repository")
    if not repository or not repository.get("nameWithOwner"):
        return None
    return ContributionRecord(
        name_with_owner=repository["nameWithOwner"],
        is_private=bool(repository.get("isPrivate")),
        is_archived=bool(repository.get("isArchived")),
        stars=int(repository.get("stargazerCount") or 0),
        pushed_at=repository.get("pushedAt"),
        merged_at=node.get("mergedAt"),
    )
