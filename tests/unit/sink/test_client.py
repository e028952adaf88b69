"""Tests for FeatureSink with a mocked requests session."""

from unittest.mock import MagicMock

import pytest
import requests

from etl_drone_sense.exceptions.downstream_errors import SubmissionError
from etl_drone_sense.features.models import FeatureCollection
from etl_drone_sense.features.transformer import to_feature
from etl_drone_sense.sink.client import FeatureSink
from tests.factories import make_location


def _make_session(status_code=200):
    response = MagicMock()
    response.status_code = status_code
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(
            f"{status_code} Error", response=response
        )
    session = MagicMock()
    session.headers = {}
    session.post.return_value = response
    return session


def _make_sink(session):
    return FeatureSink(
        api_url="https://tak.example.com",
        layer="12",
        token="etl-token",
        timeout_seconds=20,
        session=session,
    )


def _make_collection(count=2):
    return FeatureCollection(
        features=[to_feature(make_location(id=f"ds-{index}")) for index in range(count)]
    )


class TestFeatureSinkInit:
    def test_url_includes_layer(self):
        sink = _make_sink(_make_session())
        assert sink.url == "https://tak.example.com/api/layer/12/cot"

    def test_sets_bearer_token(self):
        session = _make_session()
        _make_sink(session)
        assert session.headers["Authorization"] == "Bearer etl-token"


class TestFeatureSinkSubmit:
    def test_posts_collection_once(self):
        session = _make_session()
        collection = _make_collection()
        _make_sink(session).submit(collection)
        session.post.assert_called_once_with(
            "https://tak.example.com/api/layer/12/cot",
            json=collection.to_payload(),
            timeout=20,
        )

    def test_preserves_feature_order(self):
        session = _make_session()
        _make_sink(session).submit(_make_collection(count=3))
        payload = session.post.call_args.kwargs["json"]
        assert [feature["id"] for feature in payload["features"]] == ["ds-0", "ds-1", "ds-2"]

    def test_empty_collection_is_still_submitted(self):
        session = _make_session()
        _make_sink(session).submit(FeatureCollection())
        session.post.assert_called_once()


class TestFeatureSinkFailures:
    def test_http_error_raises_submission_error(self):
        with pytest.raises(SubmissionError) as exc_info:
            _make_sink(_make_session(status_code=403)).submit(_make_collection())
        assert exc_info.value.context == {"layer": "12", "status_code": 403, "feature_count": 2}

    def test_connection_error_raises_submission_error(self):
        session = _make_session()
        session.post.side_effect = requests.ConnectionError("no route to host")
        with pytest.raises(SubmissionError, match="no route to host"):
            _make_sink(session).submit(_make_collection())
