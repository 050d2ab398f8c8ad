"""
GitHub GraphQL queries.

The issues query is a fixed document; everything that varies per request
(owner, repository, paging, filters) is passed as GraphQL variables.
"""

from dataclasses import dataclass
from typing import Any, Dict

from .models import QueryArgs

ISSUES_QUERY = """
query FetchIssues(
  $owner: String!
  $name: String!
  $first: Int!
  $after: String
  $states: [IssueState!]
  $orderBy: IssueOrder
) {
  repository(owner: $owner, name: $name) {
    issues(first: $first, after: $after, states: $states, orderBy: $orderBy) {
      totalCount
      pageInfo {
        startCursor
        endCursor
        hasNextPage
        hasPreviousPage
      }
      nodes {
        title
        url
        state
        publishedAt
        lastEditedAt
        createdAt
        updatedAt
        closedAt
        author {
          resourcePath
        }
        assignees(first: 5) {
          nodes {
            resourcePath
          }
        }
        labels(first: 5) {
          nodes {
            name
          }
        }
      }
    }
  }
}
"""


@dataclass(frozen=True)
class GraphQLRequest:
    query: str
    variables: Dict[str, Any]

    def to_payload(self) -> Dict[str, Any]:
        return {"query": self.query, "variables": self.variables}


def build_issues_query(owner: str, repo: str, args: QueryArgs) -> GraphQLRequest:
    """Build the request for one page of issues in `owner/repo`."""
    return GraphQLRequest(
        query=ISSUES_QUERY,
        variables={
            "owner": owner,
            "name": repo,
            "first": args.limit,
            "after": args.cursor,
            "states": [args.states.value],
            "orderBy": args.order_by.to_variable(),
        },
    )
