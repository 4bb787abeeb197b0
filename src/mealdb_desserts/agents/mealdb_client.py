import logging
from typing import Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from mealdb_desserts.errors import DecodeError, NetworkError
from mealdb_desserts.settings import settings

logger = logging.getLogger("mealdb_desserts.http")

T = TypeVar("T", bound=BaseModel)


class MealDBClient:
    """
    Shared GET + decode for the TheMealDB agents.

    Every failure is mapped onto the FetchError hierarchy: transport errors
    and non-2xx answers become NetworkError, anything that does not decode
    into the expected model becomes DecodeError. Nothing is retried.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.base_url = base_url or settings.base_url
        self.timeout = timeout if timeout is not None else settings.timeout
        self.transport = transport

    def _get(self, path: str, params: dict, model: Type[T]) -> T:
        try:
            with httpx.Client(base_url=self.base_url, timeout=self.timeout, transport=self.transport) as client:
                response = client.get(path, params=params)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._status_error(e) from e
        except httpx.HTTPError as e:
            raise self._transport_error(path, e) from e
        return self._decode(response, model)

    async def _aget(self, path: str, params: dict, model: Type[T]) -> T:
        try:
            async with httpx.AsyncClient(base_url=self.base_url, timeout=self.timeout, transport=self.transport) as client:
                response = await client.get(path, params=params)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise self._status_error(e) from e
        except httpx.HTTPError as e:
            raise self._transport_error(path, e) from e
        return self._decode(response, model)

    @staticmethod
    def _status_error(e: httpx.HTTPStatusError) -> NetworkError:
        status = e.response.status_code
        logger.warning(f"{e.request.url} answered with HTTP {status}")
        return NetworkError(f"Server answered with HTTP {status}", status_code=status)

    @staticmethod
    def _transport_error(path: str, e: httpx.HTTPError) -> NetworkError:
        logger.warning(f"Request to {path} failed: {e!r}")
        return NetworkError(f"Request failed: {e}")

    @staticmethod
    def _decode(response: httpx.Response, model: Type[T]) -> T:
        try:
            data = response.json()
        except ValueError as e:
            logger.warning(f"{response.request.url} returned a non-JSON body")
            raise DecodeError(f"Response is not valid JSON: {e}") from e

        try:
            return model.model_validate(data)
        except ValidationError as e:
            logger.warning(f"{response.request.url} returned an unexpected payload ({e.error_count()} errors)")
            raise DecodeError(f"Unexpected {model.__name__} payload: {e}") from e
