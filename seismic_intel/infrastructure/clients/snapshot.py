"""HTTP client for fetching the static catalog export"""

import httpx
from typing import List
from seismic_intel.domain.models import FintechRecord
from seismic_intel.domain.exceptions import DataUnavailableError, InvalidRecordError
from seismic_intel.infrastructure.snapshot import parse_snapshot
from seismic_intel.config import settings


class SnapshotClient:
    """Client for a JSON export served over HTTP (CDN, static host or mock server)"""

    def __init__(
        self,
        export_url: str | None = None,
        timeout: float | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.export_url = export_url or settings.export_url
        self.timeout = timeout or settings.http_timeout_seconds
        self.transport = transport

    async def get_records(self) -> List[FintechRecord]:
        """
        Fetch and parse the full record collection.

        Raises:
            DataUnavailableError: On timeout, HTTP errors, or invalid export data
        """
        async with httpx.AsyncClient(timeout=self.timeout, transport=self.transport) as client:
            try:
                response = await client.get(self.export_url)
                response.raise_for_status()
                return parse_snapshot(response.json())

            except httpx.TimeoutException as e:
                raise DataUnavailableError(f"Export fetch timeout after {self.timeout}s") from e
            except httpx.HTTPStatusError as e:
                raise DataUnavailableError(f"Export fetch error: {e.response.status_code}") from e
            except httpx.RequestError as e:
                raise DataUnavailableError(f"Export host unreachable: {e}") from e
            except (InvalidRecordError, ValueError) as e:
                raise DataUnavailableError(f"Invalid export data: {e}") from e
