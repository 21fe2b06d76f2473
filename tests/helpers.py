"""
GraphQL payload builders and response mocks shared by the tests.
"""

from unittest.mock import Mock


def make_response(payload, status_code=200):
    """Build a mock requests.Response returning the given JSON payload."""
    response = Mock()
    response.status_code = status_code
    response.json.return_value = payload
    return response


def contribution_node(
    name,
    merged_at="2026-03-01T10:00:00Z",
    pushed_at="2026-05-01T10:00:00Z",
    stars=50,
    is_private=False,
    is_archived=False,
):
    return {
        "mergedAt": merged_at,
        "repository": {
            "nameWithOwner": name,
            "isPrivate": is_private,
            "isArchived": is_archived,
            "stargazerCount": stars,
            "pushedAt": pushed_at,
        },
    }


def contribution_page(nodes, has_next_page=False, end_cursor=None, errors=None):
    payload = {
        "data": {
            "user": {
                "pullRequests": {
                    "pageInfo": {"hasNextPage": has_next_page, "endCursor": end_cursor},
                    "nodes": nodes,
                }
            }
        }
    }
    if errors is not None:
        payload["errors"] = [{"message": message} for message in errors]
    return payload


def owned_repo_node(
    name,
    stars=10,
    pushed_at="2026-02-01T10:00:00Z",
    is_archived=False,
    description="A useful tool",
):
    return {
        "name": name,
        "url": f"https://github.com/me/{name}",
        "description": description,
        "isArchived": is_archived,
        "stargazerCount": stars,
        "pushedAt": pushed_at,
    }


def owned_repos_page(nodes, errors=None):
    payload = {"data": {"user": {"repositories": {"nodes": nodes}}}}
    if errors is not None:
        payload["errors"] = [{"message": message} for message in errors]
    return payload


