"""
Dataset client using httpx for async HTTP calls.

Downloads the full product transaction dataset on every call; nothing is cached.
"""
import time
import httpx
from typing import Any

from infrastructure.metrics.metrics import dataset_fetch_failures_total, dataset_fetch_latency_seconds
from domain.exceptions import DatasetFetchError


class DatasetClient:
    """
    HTTP client for fetching the transaction dataset.
    
    Uses httpx.AsyncClient with configurable timeouts:
    - connect_timeout: 5 seconds (default)
    - read_timeout: 15 seconds (default)
    
    On failure, increments dataset_fetch_failures_total metric.
    """
    
    def __init__(
        self,
        url: str,
        connect_timeout: float = 5.0,
        read_timeout: float = 15.0,
        client: httpx.AsyncClient | None = None,
    ):
        """
        Initialize the dataset client.
        
        Args:
            url: Full URL of the JSON dataset
            connect_timeout: Connection timeout in seconds (default: 5.0)
            read_timeout: Read timeout in seconds (default: 15.0)
            client: Optional preconfigured httpx.AsyncClient (tests pass a MockTransport one)
        """
        self.url = url
        self.connect_timeout = connect_timeout
        self.read_timeout = read_timeout
        
        # httpx.Timeout requires either a default or all four parameters
        self._client = client or httpx.AsyncClient(
            timeout=httpx.Timeout(
                connect=connect_timeout,
                read=read_timeout,
                write=read_timeout,
                pool=connect_timeout,
            ),
        )
    
    async def fetch_transactions(self) -> list[dict[str, Any]]:
        """
        Fetch the raw transaction records.
            
        Returns:
            List of transaction dictionaries as served by the dataset
            
        Raises:
            DatasetFetchError: If the call fails (non-2xx, timeout, network error or a body that is not a record list)
        """
        start_time = time.time()
        try:
            response = await self._client.get(self.url)
            response.raise_for_status()
            data = response.json()
        except httpx.HTTPStatusError as e:
            dataset_fetch_failures_total.inc()
            raise DatasetFetchError(
                f"Dataset returned {e.response.status_code}"
            ) from e
        except httpx.TimeoutException as e:
            dataset_fetch_failures_total.inc()
            raise DatasetFetchError(
                f"Dataset request timed out after {self.read_timeout}s"
            ) from e
        except httpx.RequestError as e:
            dataset_fetch_failures_total.inc()
            raise DatasetFetchError(
                f"Dataset request failed: {str(e)}"
            ) from e
        except ValueError as e:
            dataset_fetch_failures_total.inc()
            raise DatasetFetchError(
                f"Dataset body is not valid JSON: {str(e)}"
            ) from e
        finally:
            dataset_fetch_latency_seconds.observe(time.time() - start_time)
        
        # Handle different response formats
        if isinstance(data, list):
            return data
        elif isinstance(data, dict) and isinstance(data.get("transactions"), list):
            return data["transactions"]
        elif isinstance(data, dict) and isinstance(data.get("data"), list):
            return data["data"]
        
        dataset_fetch_failures_total.inc()
        raise DatasetFetchError(
            f"Unexpected dataset body of type {type(data).__name__}"
        )
    
    async def close(self):
        """Close the httpx client."""
        await self._client.aclose()
    
    async def __aenter__(self):
        """Async context manager entry."""
        return self
    
    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit."""
        await self.close()
