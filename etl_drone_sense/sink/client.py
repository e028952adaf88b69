"""Downstream layer client.

Posts a whole feature collection to the layer's CoT endpoint, where it is
converted and broadcast to TAK clients.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import requests

from etl_drone_sense.constants import LAYER_COT_PATH
from etl_drone_sense.exceptions.downstream_errors import SubmissionError

if TYPE_CHECKING:
    from etl_drone_sense.features.models import FeatureCollection

logger = logging.getLogger(__name__)


class FeatureSink:
    """Submits feature collections to one downstream layer."""

    def __init__(
        self,
        *,
        api_url: str,
        layer: str,
        token: str,
        timeout_seconds: float,
        session: requests.Session | None = None,
    ) -> None:
        """Initialize the sink.

        Args:
            api_url: Base URL of the layer API, without trailing slash.
            layer: Layer id the features belong to.
            token: Bearer token for the layer API.
            timeout_seconds: Connect and read timeout for the request.
            session: Optional session, mainly for tests.
        """
        self._layer = layer
        self._url = api_url + LAYER_COT_PATH.format(layer=layer)
        self._timeout_seconds = timeout_seconds
        self._session = session or requests.Session()
        self._session.headers.update({"Authorization": f"Bearer {token}"})

    @property
    def url(self) -> str:
        """Endpoint the collection is posted to."""
        return self._url

    def submit(self, collection: FeatureCollection) -> None:
        """Submit the collection as a single request.

        Args:
            collection: Features to submit, in order.

        Raises:
            SubmissionError: If the request fails or returns a non-2xx status.
        """
        feature_count = len(collection.features)

        try:
            response = self._session.post(
                self._url,
                json=collection.to_payload(),
                timeout=self._timeout_seconds,
            )
            response.raise_for_status()
        except requests.HTTPError as error:
            status_code = error.response.status_code if error.response is not None else None
            raise SubmissionError(
                f"Layer {self._layer} rejected submission with HTTP {status_code}",
                layer=self._layer,
                status_code=status_code,
                feature_count=feature_count,
            ) from error
        except requests.RequestException as error:
            raise SubmissionError(
                f"Submission to layer {self._layer} failed: {error}",
                layer=self._layer,
                feature_count=feature_count,
            ) from error

        logger.info(
            "Submitted %d features to layer %s (status=%d)",
            feature_count,
            self._layer,
            response.status_code,
        )

    def close(self) -> None:
        """Close the underlying HTTP session."""
        self._session.close()
