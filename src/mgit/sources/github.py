"""GitHub remote source using the REST API."""

import asyncio

import httpx
import structlog

from mgit.core.exceptions import AuthenticationError, RateLimitError, SourceError
from mgit.core.models.repository import RemoteRepoDescriptor
from mgit.sources.base import Emit, RemoteSource
from mgit.sources.paging import DEFAULT_PAGE_SIZE, NO_MORE_PAGES, Page, PagedEnumerator

logger = structlog.get_logger(__name__)

GITHUB_API_URL = "https://api.github.com"


class GitHubSource(RemoteSource):
    """Lists the repositories a GitHub token can see.

    Three listings are walked concurrently: repositories the user owns
    or collaborates on, watched repositories and starred repositories.
    Each repository is identified by its SSH clone URL.
    """

    name = "github"

    CATEGORIES: dict[str, str] = {
        "owned": "/user/repos",
        "watched": "/user/subscriptions",
        "starred": "/user/starred",
    }

    def __init__(
        self,
        token: str,
        api_url: str = GITHUB_API_URL,
        timeout: float = 30.0,
        page_size: int = DEFAULT_PAGE_SIZE,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._token = token
        self._api_url = api_url.rstrip("/")
        self._timeout = timeout
        self._page_size = page_size
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> httpx.AsyncClient:
        """Lazy-load the HTTP client."""
        if self._client is None:
            self._client = httpx.AsyncClient(
                base_url=self._api_url,
                headers={
                    "Authorization": f"Bearer {self._token}",
                    "Accept": "application/vnd.github+json",
                    "X-GitHub-Api-Version": "2022-11-28",
                },
                timeout=self._timeout,
            )
        return self._client

    async def enumerate(self, emit: Emit) -> None:
        # Every category must settle before the caller closes the sink.
        outcomes = await asyncio.gather(
            *(
                self._enumerate_category(category, path, emit)
                for category, path in self.CATEGORIES.items()
            ),
            return_exceptions=True,
        )
        for category, outcome in zip(self.CATEGORIES, outcomes):
            if isinstance(outcome, asyncio.CancelledError):
                raise outcome
            if isinstance(outcome, BaseException):
                logger.error(
                    "Category failed",
                    source=self.name,
                    category=category,
                    error=str(outcome),
                )

    async def _enumerate_category(self, category: str, path: str, emit: Emit) -> int:
        async def fetch_page(cursor: int, page_size: int) -> Page[RemoteRepoDescriptor]:
            return await self._fetch_page(path, cursor, page_size)

        enumerator = PagedEnumerator(
            fetch_page,
            page_size=self._page_size,
            label=f"{self.name}:{category}",
        )
        count = await enumerator.run(emit)
        logger.info("Category listed", source=self.name, category=category, repositories=count)
        return count

    async def _fetch_page(
        self, path: str, cursor: int, page_size: int
    ) -> Page[RemoteRepoDescriptor]:
        params: dict[str, int] = {"per_page": page_size}
        if cursor != NO_MORE_PAGES:
            params["page"] = cursor

        response = await self.client.get(path, params=params)
        self._raise_for_status(response, path)

        items = [self._to_descriptor(entry) for entry in response.json()]
        return Page(items=items, next_cursor=self._next_cursor(response))

    @staticmethod
    def _to_descriptor(entry: dict) -> RemoteRepoDescriptor:
        # Starred listings wrap the repository when the star+json media type is used
        repo = entry.get("repo", entry)
        return RemoteRepoDescriptor(name=repo["name"], url=repo["ssh_url"])

    @staticmethod
    def _next_cursor(response: httpx.Response) -> int:
        """Read the next page number from the Link header."""
        next_link = response.links.get("next")
        if not next_link or "url" not in next_link:
            return NO_MORE_PAGES
        page = httpx.URL(next_link["url"]).params.get("page")
        try:
            return int(page) if page else NO_MORE_PAGES
        except ValueError:
            return NO_MORE_PAGES

    @staticmethod
    def _raise_for_status(response: httpx.Response, path: str) -> None:
        status = response.status_code
        details = {"path": path, "status": status}
        if status == 429 or (
            status == 403 and response.headers.get("x-ratelimit-remaining") == "0"
        ):
            raise RateLimitError(f"GitHub API rate limit exceeded for {path}", details=details)
        if status in (401, 403):
            raise AuthenticationError(f"GitHub rejected the token for {path}", details=details)
        if not response.is_success:
            raise SourceError(f"GitHub API returned {status} for {path}", details=details)

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None
