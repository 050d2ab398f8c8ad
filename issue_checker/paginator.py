"""Cursor pagination over the issues connection."""

import logging
from typing import List, Optional

import aiohttp

from .github_client import GitHubClient
from .models import Issue, IssuePage, QueryArgs

DEFAULT_MAX_PAGES = 100

logger = logging.getLogger(__name__)


async def fetch_issues(
    client: GitHubClient,
    session: aiohttp.ClientSession,
    owner: str,
    repo: str,
    args: QueryArgs,
    recursive: bool = False,
    max_pages: int = DEFAULT_MAX_PAGES,
) -> IssuePage:
    """Fetch issues page by page.

    With `recursive` the cursor is followed until GitHub reports no further
    page, or until `max_pages` pages have been fetched. Nodes keep the order
    they were fetched in. The returned page carries the total count and page
    info of the last page that was not degraded to an empty result.
    """
    nodes: List[Issue] = []
    pages = 0
    last_page: Optional[IssuePage] = None

    while True:
        page = await client.fetch_issue_page(session, owner, repo, args)
        pages += 1
        nodes.extend(page.nodes)
        if last_page is None or page != IssuePage.empty():
            last_page = page

        if not recursive or not page.page_info.has_next_page:
            break
        if pages >= max_pages:
            logger.warning(
                f"Stopped paging {owner}/{repo} after {pages} pages; "
                f"{len(nodes)} of {page.total_count} {args.states.value.lower()} issues collected"
            )
            break
        args = args.with_cursor(page.page_info.end_cursor)

    logger.debug(f"Fetched {len(nodes)} {args.states.value.lower()} issues in {pages} page(s)")
    return IssuePage(total_count=last_page.total_count, page_info=last_page.page_info, nodes=nodes)
