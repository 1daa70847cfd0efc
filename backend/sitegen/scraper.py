import asyncio
import logging
import random
from dataclasses import dataclass, field
from typing import List
from urllib.parse import urlparse

import aiohttp
from bs4 import BeautifulSoup
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import async_playwright

from .config import Settings
from .errors import FetchError

logger = logging.getLogger(__name__)

BODY_TEXT_LIMIT = 5000

SECTION_SELECTOR = 'section, .section, [class*="section"]'

# User agents for rotation to avoid detection
USER_AGENTS = [
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36",
]


@dataclass
class PageContent:
    url: str
    title: str = ""
    html: str = ""
    body_text: str = ""
    headings: List[str] = field(default_factory=list)
    section_count: int = 0


def extract_page_content(url: str, html: str) -> PageContent:
    """Pull the title, first 5000 chars of body text, h1-h3 headings and a section count out of raw HTML."""
    soup = BeautifulSoup(html, "html.parser")

    title = soup.find("title")
    title_text = title.get_text().strip() if title else ""

    body = soup.find("body")
    body_text = body.get_text() if body else ""

    headings = [h.get_text() for h in soup.select("h1, h2, h3")]

    return PageContent(
        url=url,
        title=title_text,
        html=html,
        body_text=body_text[:BODY_TEXT_LIMIT],
        headings=headings,
        section_count=len(soup.select(SECTION_SELECTOR)),
    )


class WebsiteScraper:
    def __init__(self, settings: Settings):
        self.method = settings.fetch_method
        self.timeout = settings.fetch_timeout

    async def fetch_page(self, url: str) -> PageContent:
        if not self._is_valid_url(url):
            raise FetchError(f"Invalid URL: {url}", url=url)

        logger.info(f"Fetching {url} ({self.method})...")
        if self.method == "browser":
            html = await self._fetch_with_playwright(url)
        else:
            html = await self._fetch_with_http(url)

        page = extract_page_content(url, html)
        logger.info(f"Found {page.section_count} sections, {len(page.headings)} headings")
        return page

    async def _fetch_with_http(self, url: str) -> str:
        headers = {
            'User-Agent': random.choice(USER_AGENTS),
            'Accept': 'text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8',
            'Accept-Language': 'en-US,en;q=0.5',
        }
        timeout = aiohttp.ClientTimeout(total=self.timeout)

        try:
            async with aiohttp.ClientSession(timeout=timeout, headers=headers) as session:
                async with session.get(url) as response:
                    if response.status != 200:
                        logger.error(f"HTTP request failed with status: {response.status}")
                        raise FetchError(
                            f"Failed to fetch URL: {response.status} {response.reason or ''}".strip(),
                            url=url,
                            status=response.status,
                        )
                    return await response.text()
        except FetchError:
            raise
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            raise FetchError(f"Failed to fetch URL: {str(e) or type(e).__name__}", url=url) from e

    async def _fetch_with_playwright(self, url: str) -> str:
        """Render the page in headless Chromium for sites that build their content with JavaScript."""
        try:
            async with async_playwright() as p:
                browser = await p.chromium.launch(headless=True)
                try:
                    context = await browser.new_context(user_agent=random.choice(USER_AGENTS))
                    page = await context.new_page()
                    response = await page.goto(url, wait_until="networkidle", timeout=self.timeout * 1000)
                    if response is not None and not response.ok:
                        raise FetchError(
                            f"Failed to fetch URL: {response.status} {response.status_text}".strip(),
                            url=url,
                            status=response.status,
                        )
                    return await page.content()
                finally:
                    await browser.close()
        except FetchError:
            raise
        except PlaywrightError as e:
            raise FetchError(f"Failed to fetch URL: {str(e)}", url=url) from e

    def _is_valid_url(self, url: str) -> bool:
        """Validate URL format"""
        try:
            result = urlparse(url)
            return all([result.scheme, result.netloc])
        except Exception:
            return False
