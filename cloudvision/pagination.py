from __future__ import annotations

from typing import Any, AsyncIterator, Awaitable, Callable, Generic, TypeVar

import pydantic

RequestT = TypeVar("RequestT", bound=pydantic.BaseModel)
ResponseT = TypeVar("ResponseT", bound=pydantic.BaseModel)


class AsyncPager(Generic[RequestT, ResponseT]):
    """Iterates over the items of a list method, fetching pages lazily.

    ```python
    async for product in await client.list_products({"parent": parent}):
        print(product.display_name)
    ```
    """

    def __init__(
        self,
        fetch: Callable[[RequestT], Awaitable[ResponseT]],
        request: RequestT,
        first_page: ResponseT,
        items_field: str,
    ):
        """
        Args:
            fetch: Issues the list call for a request.
            request: The request that produced `first_page`.
            first_page: The already fetched first response.
            items_field: Name of the response field holding the items, e.g. "products".
        """
        self._fetch = fetch
        self._first_request = request
        self._first_page = first_page
        # the last fetched page
        self._page = first_page
        self._items_field = items_field

    def __repr__(self) -> str:
        return f"AsyncPager(items_field={self._items_field!r}, next_page_token={self.next_page_token!r})"

    @property
    def next_page_token(self) -> str:
        return self._page.next_page_token

    async def pages(self) -> AsyncIterator[ResponseT]:
        """Yield whole responses, starting with the first page.

        Every iteration starts over at the first page, later pages are fetched again.
        """
        request, page = self._first_request, self._first_page
        yield page
        while page.next_page_token:
            request = request.model_copy(update={"page_token": page.next_page_token})
            page = await self._fetch(request)
            self._page = page
            yield page

    async def __aiter__(self) -> AsyncIterator[Any]:
        async for page in self.pages():
            for item in getattr(page, self._items_field):
                yield item
