import threading
import unittest
from unittest.mock import MagicMock

import requests

from tenseflow.contract import DEFAULT_EXAMPLE
from tenseflow.runtime import (
    SHAPE_ERROR,
    AnalysisSession,
    AnalyzerClient,
    AnalyzerError,
    SubmissionInFlightError,
)


def _response(status=200, body=None, json_error=False):
    resp = MagicMock()
    resp.status_code = status
    if status >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(response=resp)
    if json_error:
        resp.json.side_effect = ValueError("not json")
    else:
        resp.json.return_value = body
    return resp


def _client(resp=None, exc=None):
    http = MagicMock()
    if exc is not None:
        http.post.side_effect = exc
    else:
        http.post.return_value = resp
    return AnalyzerClient(endpoint="http://analyzer.local/api/analyzer", timeout=5, session=http), http


class AnalyzerClientTests(unittest.TestCase):
    def test_posts_trimmed_sentence_as_json(self):
        body = {"sentence": "C", "tense": "Future Simple", "tags": []}
        client, http = _client(_response(body=body))
        self.assertEqual(client.analyze("  She reads.  "), body)
        http.post.assert_called_once()
        args, kwargs = http.post.call_args
        self.assertEqual(args[0], "http://analyzer.local/api/analyzer")
        self.assertEqual(kwargs["json"], {"sentence": "She reads."})
        self.assertEqual(kwargs["timeout"], 5)

    def test_blank_sentence_rejected_before_network(self):
        client, http = _client(_response(body=[]))
        for value in ("", "   ", None):
            with self.assertRaises(ValueError):
                client.analyze(value)
        http.post.assert_not_called()

    def test_non_2xx_is_failure(self):
        client, _ = _client(_response(status=500))
        with self.assertRaises(AnalyzerError) as ctx:
            client.analyze("hello there")
        self.assertIn("HTTP 500", str(ctx.exception))

    def test_transport_failure(self):
        client, _ = _client(exc=requests.ConnectionError("refused"))
        with self.assertRaises(AnalyzerError) as ctx:
            client.analyze("hello there")
        self.assertIsInstance(ctx.exception.__cause__, requests.ConnectionError)

    def test_invalid_json_body(self):
        client, _ = _client(_response(json_error=True))
        with self.assertRaises(AnalyzerError):
            client.analyze("hello there")


class AnalysisSessionTests(unittest.TestCase):
    def test_recognized_response_is_normalized(self):
        inner = {"sentence": "B", "tense": "Past Simple", "tags": []}
        client, _ = _client(_response(body={"messages": [inner]}))
        result = AnalysisSession(client=client).submit("B")
        self.assertEqual(result.examples, [inner])
        self.assertEqual(result.shape, "messages")
        self.assertFalse(result.fallback)
        self.assertIsNone(result.error)

    def test_unrecognized_shape_falls_back_without_error(self):
        client, _ = _client(_response(body={"foo": 1}))
        result = AnalysisSession(client=client).submit("anything")
        self.assertEqual(result.examples, [DEFAULT_EXAMPLE])
        self.assertTrue(result.fallback)
        self.assertIsNone(result.error)

    def test_failure_falls_back_with_error(self):
        client, _ = _client(_response(status=404))
        session = AnalysisSession(client=client)
        result = session.submit("anything")
        self.assertEqual(result.examples, [DEFAULT_EXAMPLE])
        self.assertEqual(result.shape, SHAPE_ERROR)
        self.assertEqual(result.error, "HTTP 404")
        self.assertFalse(session.fetching)

    def test_second_submission_rejected_while_fetching(self):
        started = threading.Event()
        release = threading.Event()
        body = [{"sentence": "A", "tense": "Present Simple", "tags": []}]

        def slow_post(*args, **kwargs):
            started.set()
            release.wait(5)
            return _response(body=body)

        client, http = _client()
        http.post.side_effect = slow_post
        session = AnalysisSession(client=client)
        results = []
        worker = threading.Thread(target=lambda: results.append(session.submit("first")))
        worker.start()
        self.assertTrue(started.wait(5))
        self.assertTrue(session.fetching)
        with self.assertRaises(SubmissionInFlightError):
            session.submit("second")
        release.set()
        worker.join(5)
        self.assertFalse(session.fetching)
        self.assertEqual(results[0].examples, body)
        self.assertEqual(http.post.call_count, 1)
        # the gate reopens once the first request resolves
        self.assertEqual(session.submit("third").examples, body)

    def test_payload_shape(self):
        client, _ = _client(_response(body={"sentence": "C", "tense": "Future Simple", "tags": []}))
        payload = AnalysisSession(client=client).submit("C").as_payload()
        self.assertEqual(set(payload), {"examples", "shape", "error", "fallback"})
        self.assertEqual(payload["shape"], "single")


if __name__ == "__main__":
    unittest.main()
