"""
GitHub repository lookup for profile pages
"""
from typing import Any, Dict, List, Optional
import logging
from urllib.parse import quote

import httpx

from app.config import settings

logger = logging.getLogger(__name__)


class GitHubProfileNotFound(Exception):
    """GitHub answered with anything other than 200 for a username"""

    def __init__(self, username: str, status_code: int):
        super().__init__(f"GitHub returned {status_code} for {username}")
        self.username = username
        self.status_code = status_code


class GitHubService:
    """List a GitHub user's public repositories through the REST API"""

    def __init__(
        self,
        client_id: str = "",
        client_secret: str = "",
        api_base: str = "https://api.github.com",
        user_agent: str = "DevConnector-API/1.0",
        per_page: int = 5,
        timeout: float = 10,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize GitHub service.

        Args:
            client_id: OAuth app client id, sent with every request if set
            client_secret: OAuth app client secret
            api_base: GitHub API root
            user_agent: Value for the User-Agent header GitHub requires
            per_page: Number of repositories to return
            timeout: Request timeout in seconds
            transport: Optional httpx transport, used to stub GitHub out
        """
        self.client_id = client_id
        self.client_secret = client_secret
        self.api_base = api_base.rstrip("/")
        self.per_page = per_page
        self.timeout = timeout
        self.transport = transport
        self.headers = {
            "Accept": "application/vnd.github.v3+json",
            "User-Agent": user_agent
        }

    def _build_params(self) -> Dict[str, Any]:
        params = {
            "per_page": self.per_page,
            "sort": "created",
            "direction": "asc"
        }
        if self.client_id and self.client_secret:
            params["client_id"] = self.client_id
            params["client_secret"] = self.client_secret
        return params

    async def get_user_repos(self, username: str) -> List[Dict[str, Any]]:
        """
        Get a user's repositories, oldest first.

        Args:
            username: GitHub login

        Returns:
            The JSON body GitHub returned, unmodified

        Raises:
            GitHubProfileNotFound: If GitHub answers with a non-200 status
            httpx.HTTPError: For network failures
        """
        url = f"{self.api_base}/users/{quote(username, safe='')}/repos"

        async with httpx.AsyncClient(
            timeout=self.timeout,
            headers=self.headers,
            transport=self.transport
        ) as client:
            response = await client.get(url, params=self._build_params())

        if response.status_code != 200:
            logger.warning(f"GitHub repos lookup failed for {username}: {response.status_code}")
            raise GitHubProfileNotFound(username, response.status_code)

        return response.json()


def get_github_service() -> GitHubService:
    """Dependency returning a GitHub service built from settings"""
    return GitHubService(
        client_id=settings.GITHUB_CLIENT_ID,
        client_secret=settings.GITHUB_CLIENT_SECRET,
        api_base=settings.GITHUB_API_BASE,
        user_agent=settings.GITHUB_USER_AGENT,
        per_page=settings.GITHUB_REPOS_PER_PAGE,
        timeout=settings.GITHUB_TIMEOUT
    )
