#!/usr/bin/env python3
"""
GitHub API client for the Issue Checker.

This module sends GraphQL queries to GitHub and converts the issue
connection in the response into typed pages.
"""

import logging
from typing import Any, Dict

import aiohttp

from .models import IssuePage, QueryArgs, ResponseFormatError
from .queries import GraphQLRequest, build_issues_query

GITHUB_GRAPHQL_API_ENDPOINT = "https://api.github.com/graphql"

logger = logging.getLogger(__name__)


class GitHubAPIError(Exception):
    """Raised when the GraphQL endpoint answers with a non-200 status"""

    def __init__(self, status: int, body: str = ""):
        super().__init__(f"GitHub API error: {status}")
        self.status = status
        self.body = body


class GitHubClient:
    """GitHub GraphQL client for issue reporting"""

    def __init__(self, token: str, endpoint: str = GITHUB_GRAPHQL_API_ENDPOINT):
        self.token = token
        self.endpoint = endpoint
        self.headers = {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

    async def execute(self, session: aiohttp.ClientSession, request: GraphQLRequest) -> Dict[str, Any]:
        """POST a GraphQL request and return the parsed JSON body"""
        async with session.post(self.endpoint, headers=self.headers, json=request.to_payload()) as resp:
            if resp.status != 200:
                raise GitHubAPIError(resp.status, await resp.text())
            return await resp.json()

    async def fetch_issue_page(
        self,
        session: aiohttp.ClientSession,
        owner: str,
        repo: str,
        args: QueryArgs,
    ) -> IssuePage:
        """Fetch one page of issues.

        GraphQL errors, a missing repository and a malformed connection are
        logged and degrade to an empty page. Transport failures propagate.
        """
        body = await self.execute(session, build_issues_query(owner, repo, args))
        data = body.get("data") or {}

        errors = body.get("errors") or data.get("errors")
        if errors:
            logger.error(f"GitHub GraphQL errors for {owner}/{repo}: {errors}")
            return IssuePage.empty()

        repository = data.get("repository")
        if not repository:
            logger.warning(f"Repository {owner}/{repo} not found in GraphQL response")
            return IssuePage.empty()

        try:
            return IssuePage.from_graphql(repository.get("issues"))
        except ResponseFormatError as e:
            logger.error(f"Malformed issue connection for {owner}/{repo}: {e}")
            return IssuePage.empty()
